"""Typed accessors over a bag of fixture values.

A ``FixtureStore`` keeps two string-keyed mappings: ``data`` with the
inputs a test consumes and ``metadata`` describing the fixture itself.
Values are stored as plain deserialized structures and adapted to the
requested type on every read.

Lookups come in two flavours. The lenient ``get`` family collapses every
failure into ``None`` or an empty list. The strict ``*_or_raise`` family
raises ``FixtureAdaptationError`` when no value can be produced.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence, TypeVar

from core.adaptation import adapt, adapt_or_none
from core.errors import FixtureAdaptationError
from core.naming import type_display_name, type_name_to_key

T = TypeVar("T")

_MISSING = object()


@dataclass(frozen=True)
class FixtureStore:
    """Fixture values for one test case.

    Attributes:
        data: Input values keyed by input name.
        metadata: Descriptive values about the fixture.
    """

    data: dict[str, object] = field(default_factory=dict)
    metadata: dict[str, object] = field(default_factory=dict)

    @classmethod
    def from_mappings(
        cls,
        data: Mapping[str, object] | None = None,
        metadata: Mapping[str, object] | None = None,
    ) -> "FixtureStore":
        """Build a store owning copies of the provided mappings."""
        return cls(data=dict(data or {}), metadata=dict(metadata or {}))

    def get(self, target_type: type[T] | None, key: str | None = None) -> T | None:
        """Return the value at ``key`` adapted to ``target_type``.

        When ``key`` is omitted it is derived from the type name, so
        ``CreatePlatform`` is read from ``createPlatform``.

        Args:
            target_type: Requested type.
            key: Optional explicit input name.

        Returns:
            Adapted value, or None when the key is missing or blank, the
            store is empty, or the value does not fit the type.
        """
        raw_value = self._lookup(target_type, key)
        if raw_value is _MISSING or target_type is None:
            return None
        return adapt(raw_value, target_type)

    def get_or_raise(self, target_type: type[T] | None, key: str | None = None) -> T:
        """Return the adapted value at ``key`` or raise.

        Raises:
            FixtureAdaptationError: If ``get`` produces no value.
        """
        value = self.get(target_type, key)
        if value is None:
            raise FixtureAdaptationError(type_display_name(target_type))
        return value

    def get_multiple(self, target_type: type[T] | None, key: str | None = None) -> list[T]:
        """Return every value at ``key`` adapted to ``target_type``.

        A single non-collection value is treated as a one element
        collection. Elements that are None or do not fit the type are
        dropped; the remaining order follows the fixture.
        """
        raw_value = self._lookup(target_type, key)
        if raw_value is _MISSING or target_type is None:
            return []
        if not _is_collection(raw_value):
            adapted_value = adapt(raw_value, target_type)
            return [] if adapted_value is None else [adapted_value]
        adapted_values = []
        for element in raw_value:
            if element is None:
                continue
            adapted_element = adapt(element, target_type)
            if adapted_element is not None:
                adapted_values.append(adapted_element)
        return adapted_values

    def get_multiple_or_raise(
        self,
        target_type: type[T] | None,
        key: str | None = None,
    ) -> list[T]:
        """Return every value at ``key``, failing on the first bad element.

        A missing key, blank key, empty store or missing type still yields
        an empty list; only values that are present and cannot be adapted
        are errors.

        Raises:
            FixtureAdaptationError: If the value or any non-None element
                cannot be adapted.
        """
        raw_value = self._lookup(target_type, key)
        if raw_value is _MISSING or target_type is None:
            return []
        if not _is_collection(raw_value):
            return [_adapt_or_raise(raw_value, target_type)]
        return [
            _adapt_or_raise(element, target_type) for element in raw_value if element is not None
        ]

    def get_metadata(self, key: str, target_type: Any = str) -> Any:
        """Return the metadata value at ``key`` adapted to ``target_type``.

        Defaults to text. Returns None when the key is absent or the value
        cannot be adapted.
        """
        return adapt_or_none(self.metadata.get(key), target_type)

    def _lookup(self, target_type: object, key: str | None) -> object:
        if target_type is None:
            return _MISSING
        input_name = type_name_to_key(target_type) if key is None else key
        if not input_name or not input_name.strip():
            return _MISSING
        return self.data.get(input_name, _MISSING)


def _is_collection(value: object) -> bool:
    if isinstance(value, (set, frozenset)):
        return True
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _adapt_or_raise(raw_value: object, target_type: type[T]) -> T:
    adapted_value = adapt(raw_value, target_type)
    if adapted_value is None:
        raise FixtureAdaptationError(type_display_name(target_type))
    return adapted_value
