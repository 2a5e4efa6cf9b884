"""Structural coercion of generic fixture values into typed objects.

Fixture values arrive as plain mappings, lists and scalars. This module
maps them onto requested types with pydantic and reports incompatible
shapes as ``None`` instead of raising, so callers decide how strict to be.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, TypeVar, get_origin

from pydantic import PydanticUserError, TypeAdapter, ValidationError

from core.constants import ADAPTER_CACHE_SIZE
from core.logging_config import get_logger
from core.naming import type_display_name

T = TypeVar("T")

_LOGGER = get_logger(__name__)
_TEXT_SCALAR_TYPES = (int, float)


def adapt(raw_value: object, target_type: type[T]) -> T | None:
    """Adapt a generic value to ``target_type``.

    Args:
        raw_value: Deserialized mapping, sequence or scalar.
        target_type: Requested type (model, dataclass, builtin or generic alias).

    Returns:
        Adapted instance, or None when the value does not fit the type.
    """
    try:
        return _type_adapter(target_type).validate_python(raw_value)
    except PydanticUserError as error:
        _LOGGER.warning(
            "adaptation_unsupported_type",
            target_type=type_display_name(target_type),
            error=str(error),
        )
        return None
    except ValidationError as error:
        _LOGGER.debug(
            "adaptation_failed",
            target_type=type_display_name(target_type),
            error_count=error.error_count(),
        )
        return None


def adapt_or_none(raw_value: object, target_type: type[T]) -> T | None:
    """Tolerantly adapt a metadata value to ``target_type``.

    Numbers and booleans requested as text are rendered the way they
    appear in fixture files; everything else goes through ``adapt``.
    """
    if raw_value is None:
        return None
    if target_type is int and isinstance(raw_value, bool):
        return int(raw_value)  # type: ignore[return-value]
    if get_origin(target_type) is None and isinstance(target_type, type):
        if isinstance(raw_value, target_type):
            return raw_value
    if target_type is str:
        if isinstance(raw_value, bool):
            return "true" if raw_value else "false"  # type: ignore[return-value]
        if isinstance(raw_value, _TEXT_SCALAR_TYPES):
            return str(raw_value)  # type: ignore[return-value]
    return adapt(raw_value, target_type)


def _type_adapter(target_type: Any) -> TypeAdapter[Any]:
    try:
        hash(target_type)
    except TypeError:
        # unhashable type alias
        return TypeAdapter(target_type)
    return _cached_type_adapter(target_type)


@lru_cache(maxsize=ADAPTER_CACHE_SIZE)
def _cached_type_adapter(target_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target_type)
