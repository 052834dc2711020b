"""주문 API 테스트 — 주문 생성, 취소, 검색.

Order API tests.
"""

from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import DeliveryStatus
from app.repositories.order_repository import order_repository

URL = "/api/orders/"


async def place_order(client: AsyncClient, member_id: int, item_id: int, count: int):
    return await client.post(URL, json={"memberId": member_id, "itemId": item_id, "count": count})


class TestOrderCreate:
    """주문 생성 테스트."""

    async def test_order_removes_stock(self, client: AsyncClient, member, book):
        res = await place_order(client, member.id, book.id, 3)
        assert res.status_code == 201
        order_id = res.json()["orderId"]
        assert isinstance(order_id, int)

        item = (await client.get(f"/api/items/{book.id}")).json()
        assert item["stockQuantity"] == 7

    async def test_order_uses_member_address_and_item_price(self, client: AsyncClient, member, book):
        await place_order(client, member.id, book.id, 2)

        summary = (await client.get("/api/v4/simple-orders")).json()[0]
        assert summary["name"] == "tester"
        assert summary["address"] == {"city": "Seoul", "street": "Main", "zipcode": "12345"}

        orders = (await client.get(URL)).json()
        assert orders[0]["totalPrice"] == 15000 * 2
        assert orders[0]["deliveryStatus"] == "READY"

    async def test_not_enough_stock(self, client: AsyncClient, member, book):
        res = await place_order(client, member.id, book.id, 11)
        assert res.status_code == 400
        assert res.json()["detail"] == "need more stock"

    async def test_unknown_member(self, client: AsyncClient, book):
        res = await place_order(client, 9999, book.id, 1)
        assert res.status_code == 404

    async def test_unknown_item(self, client: AsyncClient, member):
        res = await place_order(client, member.id, 9999, 1)
        assert res.status_code == 404

    async def test_zero_count(self, client: AsyncClient, member, book):
        res = await place_order(client, member.id, book.id, 0)
        assert res.status_code == 422


class TestOrderCancel:
    """주문 취소 테스트."""

    async def test_cancel_restores_stock(self, client: AsyncClient, member, book):
        order_id = (await place_order(client, member.id, book.id, 4)).json()["orderId"]

        res = await client.post(f"{URL}{order_id}/cancel")
        assert res.status_code == 200
        assert res.json()["orderStatus"] == "CANCEL"

        item = (await client.get(f"/api/items/{book.id}")).json()
        assert item["stockQuantity"] == 10

    async def test_cancel_completed_delivery(self, client: AsyncClient, db: AsyncSession, member, book):
        """배송 완료된 주문 취소 시 400."""
        order_id = (await place_order(client, member.id, book.id, 1)).json()["orderId"]
        order = await order_repository.find_one_with_items(db, order_id)
        order.delivery.status = DeliveryStatus.COMP
        await db.flush()

        res = await client.post(f"{URL}{order_id}/cancel")
        assert res.status_code == 400

    async def test_cancel_missing_order(self, client: AsyncClient):
        res = await client.post(f"{URL}9999/cancel")
        assert res.status_code == 404


class TestOrderSearch:
    """주문 검색 테스트."""

    async def test_search_all(self, client: AsyncClient, seeded):
        data = (await client.get(URL)).json()
        assert [o["memberName"] for o in data] == ["userA", "userB"]
        assert [o["totalPrice"] for o in data] == [50000, 50000]

    async def test_search_by_member_name(self, client: AsyncClient, seeded):
        data = (await client.get(URL, params={"memberName": "userA"})).json()
        assert [o["memberName"] for o in data] == ["userA"]

    async def test_search_by_status(self, client: AsyncClient, seeded):
        data = (await client.get(URL)).json()
        await client.post(f"{URL}{data[0]['orderId']}/cancel")

        cancelled = (await client.get(URL, params={"orderStatus": "CANCEL"})).json()
        ordered = (await client.get(URL, params={"orderStatus": "ORDER"})).json()
        assert [o["memberName"] for o in cancelled] == ["userA"]
        assert [o["memberName"] for o in ordered] == ["userB"]

    async def test_search_invalid_status(self, client: AsyncClient, seeded):
        res = await client.get(URL, params={"orderStatus": "SHIPPED"})
        assert res.status_code == 422
