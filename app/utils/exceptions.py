"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for common error patterns,
plus the shop's domain errors (stock shortage, non-cancellable order).

Usage:
    from app.utils.exceptions import NotFoundError, DuplicateError
    raise NotFoundError("Member not found")
    raise DuplicateError("Member name already exists")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    Raised when a requested resource (member, item, order) does not exist.
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateError(HTTPException):
    """409 Conflict 예외 — 중복 리소스 생성 시도 시 사용.

    Raised when attempting to create a resource that violates a uniqueness rule
    (e.g. duplicate member name).
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    Raised when the request data is invalid beyond what Pydantic validation catches
    (e.g. business logic validation failures, invalid state transitions).
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class NotEnoughStockError(BadRequestError):
    """재고 부족 예외 — 재고가 0 미만이 되는 차감 요청.

    Raised by Item.remove_stock when the stock would go negative.
    """

    def __init__(self, detail: str = "need more stock") -> None:
        super().__init__(detail=detail)


class OrderNotCancellableError(BadRequestError):
    """주문 취소 불가 예외 — 이미 배송완료된 주문.

    Raised by Order.cancel when the delivery is already completed.
    """

    def __init__(self, detail: str = "Orders with a completed delivery cannot be cancelled") -> None:
        super().__init__(detail=detail)
