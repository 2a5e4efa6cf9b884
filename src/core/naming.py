"""Canonical fixture key derivation.

Fixture files name their entries after the type they hold, with the
first letter lower-cased: ``CreatePlatform`` is stored as ``createPlatform``.
"""

from __future__ import annotations


def type_display_name(target_type: object) -> str:
    """Return the simple display name of a type."""
    name = getattr(target_type, "__name__", None)
    if isinstance(name, str):
        return name
    return repr(target_type)


def type_name_to_key(target_type: object) -> str:
    """Derive the canonical fixture key for a type.

    Args:
        target_type: Class or type alias to derive the key from.

    Returns:
        Display name with its first character lower-cased.
    """
    name = type_display_name(target_type)
    first_character = name[:1]
    lowered_character = first_character.lower()
    # keep characters whose lower case form expands, such as U+0130
    if len(lowered_character) != 1:
        return name
    return lowered_character + name[1:]
