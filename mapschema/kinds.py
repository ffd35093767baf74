# =============================================================================
# mapschema -- TYPE KINDS
# File:   mapschema/kinds.py
# =============================================================================
#
# SCOPE
# -----
# Classifies declared field annotations and runtime source values into a
# small set of kinds. Both the namers and the default convertibility
# predicate are written against these kinds, never against concrete classes.
#
# Declared types may be:
#   builtins           bool, int, float, str, dict, list, tuple
#   numpy scalars      np.int8 .. np.int64, np.uint8 .. np.uint64,
#                      np.float16 .. np.float64, np.bool_
#   typing forms       Any, Optional[T], Union[...], T | None,
#                      List[T], Dict[K, V], Mapping[K, V], Sequence[T],
#                      Literal[...]
#   NewType aliases    classified as their supertype
#   dataclasses        record types, compared field by field
#   any other class    accepted by isinstance
#
# bool is classified before int: True is never an integer here.
# =============================================================================

from __future__ import annotations

import dataclasses
import types
import typing
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, Literal, Tuple, Union

import numpy as np


_NONE_TYPE = type(None)
_UNION_ORIGINS = (Union, types.UnionType)


class TypeKind(str, Enum):
    """
    Kind of a declared type or of a runtime value's type.

    INT covers every signed integer width, UINT every unsigned width and
    FLOAT every floating width, Python or numpy.
    """
    BOOL     = "BOOL"
    INT      = "INT"
    UINT     = "UINT"
    FLOAT    = "FLOAT"
    STRING   = "STRING"
    MAPPING  = "MAPPING"
    SEQUENCE = "SEQUENCE"
    RECORD   = "RECORD"
    UNION    = "UNION"
    LITERAL  = "LITERAL"
    ANY      = "ANY"
    OTHER    = "OTHER"

    @property
    def is_numeric(self) -> bool:
        return self in (TypeKind.INT, TypeKind.UINT, TypeKind.FLOAT)

    @property
    def is_integer(self) -> bool:
        return self in (TypeKind.INT, TypeKind.UINT)


def is_union(t: Any) -> bool:
    return typing.get_origin(t) in _UNION_ORIGINS


def is_record_type(t: Any) -> bool:
    """True if t is a dataclass class (not an instance)."""
    return isinstance(t, type) and dataclasses.is_dataclass(t)


def unwrap_optional(t: Any) -> Tuple[bool, Any]:
    """
    Split an optional annotation into (is_optional, element type).

    Optional[str] -> (True, str)
    Optional[Union[int, str]] -> (True, Union[int, str])
    str -> (False, str)
    """
    if not is_union(t):
        return False, t
    args = typing.get_args(t)
    members = tuple(a for a in args if a is not _NONE_TYPE)
    if len(members) == len(args):
        return False, t
    if len(members) == 1:
        return True, members[0]
    return True, Union[members]


def is_literal(t: Any) -> bool:
    return typing.get_origin(t) is Literal


def unwrap_newtype(t: Any) -> Any:
    """UserId = NewType("UserId", int): UserId -> int. Nested aliases are followed."""
    while callable(t) and hasattr(t, "__supertype__"):
        t = t.__supertype__
    return t


def origin_type(t: Any) -> Any:
    """List[int] -> list, Dict[str, Any] -> dict; anything else unchanged."""
    origin = typing.get_origin(t)
    return t if origin is None else origin


def type_kind(t: Any) -> TypeKind:
    """Classify a declared annotation or a runtime type."""
    t = unwrap_newtype(t)
    if t is Any:
        return TypeKind.ANY
    if is_union(t):
        return TypeKind.UNION
    if is_literal(t):
        return TypeKind.LITERAL
    t = origin_type(t)
    if not isinstance(t, type):
        return TypeKind.OTHER
    if is_record_type(t):
        return TypeKind.RECORD
    if issubclass(t, (bool, np.bool_)):
        return TypeKind.BOOL
    if issubclass(t, np.unsignedinteger):
        return TypeKind.UINT
    if issubclass(t, (int, np.integer)):
        return TypeKind.INT
    if issubclass(t, (float, np.floating)):
        return TypeKind.FLOAT
    if issubclass(t, str):
        return TypeKind.STRING
    if issubclass(t, Mapping):
        return TypeKind.MAPPING
    if issubclass(t, Sequence) and not issubclass(t, (bytes, bytearray)):
        return TypeKind.SEQUENCE
    return TypeKind.OTHER


def value_kind(value: Any) -> TypeKind:
    """Kind of a runtime source value. None has no kind and must be checked first."""
    return type_kind(type(value))


__all__ = [
    "TypeKind",
    "is_union",
    "is_literal",
    "unwrap_newtype",
    "is_record_type",
    "unwrap_optional",
    "origin_type",
    "type_kind",
    "value_kind",
]
