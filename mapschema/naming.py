# mapschema/naming.py
# Version: 1.0.0
#
# Display names for declared field types and runtime value types, plus the
# small natural-language helpers used to build mismatch messages.
#
# Two naming policies:
#   type_name_detailed  -- exact names: "int32", "uint8", "float", "*str"
#   type_name_simple    -- every integer width -> "int", every unsigned
#                          width -> "uint", every floating width -> "float"
#
# A null source value has no type. Callers use NULL_TYPE_NAME instead of
# calling a namer.

from __future__ import annotations

import typing
from typing import Any, Dict, Sequence

from mapschema.constants import (
    ARTICLE_VOWELS,
    NULL_TYPE_NAME,
    PATH_SEPARATOR,
    POINTER_PREFIX,
)
from mapschema.kinds import TypeKind, is_union, origin_type, type_kind, unwrap_optional

_SIMPLE_NAMES: Dict[TypeKind, str] = {
    TypeKind.INT:   "int",
    TypeKind.UINT:  "uint",
    TypeKind.FLOAT: "float",
}


def _bare_name(t: Any) -> str:
    if t is Any:
        return "Any"
    if is_union(t):
        return " | ".join(_bare_name(member) for member in typing.get_args(t))
    t = origin_type(t)
    name = getattr(t, "__name__", None)
    if isinstance(name, str) and name:
        return name
    return repr(t)


def type_name_detailed(t: Any) -> str:
    """
    Return the declared name of a type.

    Optional types are prefixed with "*":
        int            -> "int"
        np.int32       -> "int32"
        Optional[str]  -> "*str"
        List[int]      -> "list"
        Address        -> "Address"
    """
    optional, elem = unwrap_optional(t)
    if optional:
        return POINTER_PREFIX + _bare_name(elem)
    return _bare_name(t)


def type_name_simple(t: Any) -> str:
    """
    Return a generic name for a type.

    Floats are always "float", unsigned ints are always "uint" and signed
    ints are always "int". Optional types keep the "*" prefix.
    """
    optional, elem = unwrap_optional(t)
    name = _SIMPLE_NAMES.get(type_kind(elem)) or _bare_name(elem)
    if optional:
        return POINTER_PREFIX + name
    return name


def type_name_starts_with_vowel(name: str) -> bool:
    # "u" is not a vowel here: "a uint", "a user".
    name = name.lstrip(POINTER_PREFIX)
    if not name:
        return False
    return name[0].lower() in ARTICLE_VOWELS


def type_name_with_article(name: str) -> str:
    """Prefix a type name with "a" or "an". "null" is returned unchanged."""
    if name == NULL_TYPE_NAME:
        return name
    if type_name_starts_with_vowel(name):
        return "an " + name
    return "a " + name


def format_path(field: str, path: Sequence[str] = ()) -> str:
    """format_path("Baz", ("Cat", "A")) -> "Cat.A.Baz"."""
    return PATH_SEPARATOR.join(tuple(path) + (field,))


__all__ = [
    "type_name_detailed",
    "type_name_simple",
    "type_name_starts_with_vowel",
    "type_name_with_article",
    "format_path",
]
