"""ORM 엔티티 직접 직렬화 유틸리티.

Direct ORM entity serialization utility.
Turns a mapped entity into a JSON-ready dict by walking its mapped
attributes, following two rules:

    - ``info={"json_ignore": True}`` 관계는 건너뜀 (Back references are skipped)
    - 아직 로드되지 않은 지연 로딩 속성은 None (Unloaded lazy attributes become None,
      no query is ever issued)

Entities are exposed as-is, so every mapped field becomes part of the API.
Prefer DTOs for real endpoints.
"""

import dataclasses
import enum
from typing import Any

from pydantic.alias_generators import to_camel
from sqlalchemy import inspect
from sqlalchemy.orm import InstanceState, Mapper


def _column_keys(mapper: Mapper) -> list[str]:
    """직렬화할 컬럼 속성 — FK 컬럼과 복합 값에 묶인 컬럼은 제외."""
    composite_keys: set[str] = {
        prop.key for composite in mapper.composites for prop in composite.props
    }
    keys: list[str] = []
    for prop in mapper.column_attrs:
        if prop.key in composite_keys:
            continue
        if any(column.foreign_keys for column in prop.columns):
            continue
        keys.append(prop.key)
    return keys


def _value(value: Any) -> Any:
    if isinstance(value, enum.Enum):
        return value.value
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {to_camel(k): v for k, v in dataclasses.asdict(value).items()}
    return value


def entity_to_dict(entity: Any, _path: tuple[int, ...] = ()) -> dict[str, Any]:
    """엔티티를 JSON 직렬화 가능한 딕셔너리로 변환합니다.

    Convert a mapped entity (and the loaded part of its graph) to a dict
    with camelCase keys.

    Args:
        entity: SQLAlchemy 매핑 엔티티 (Mapped entity instance)

    Returns:
        dict[str, Any]: 직렬화된 엔티티 (Serialized entity)

    Raises:
        ValueError: json_ignore 없이 양방향 관계가 순환할 때
                    (A bidirectional association cycles without json_ignore)
    """
    if id(entity) in _path:
        raise ValueError(
            f"Circular reference while serializing {type(entity).__name__}; "
            "mark the inverse relationship with info={'json_ignore': True}"
        )
    path: tuple[int, ...] = _path + (id(entity),)

    state: InstanceState = inspect(entity)
    mapper: Mapper = state.mapper
    unloaded: set[str] = set(state.unloaded)
    data: dict[str, Any] = {}

    for key in _column_keys(mapper):
        data[to_camel(key)] = None if key in unloaded else _value(getattr(entity, key))

    for composite in mapper.composites:
        data[to_camel(composite.key)] = _value(getattr(entity, composite.key))

    for rel in mapper.relationships:
        if rel.info.get("json_ignore"):
            continue
        name: str = to_camel(rel.key)
        if rel.key in unloaded:
            # 지연 로딩 프록시 대신 null (Lazy attribute not loaded yet)
            data[name] = None
            continue

        related: Any = getattr(entity, rel.key)
        if related is None:
            data[name] = None
        elif rel.uselist:
            data[name] = [entity_to_dict(child, path) for child in related]
        else:
            data[name] = entity_to_dict(related, path)

    return data
