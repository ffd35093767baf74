# mapschema/convert.py
# Version: 1.0.0
#
# The default convertibility predicate.
#
# A source value is convertible to a declared type when it can be assigned
# without parsing, truncation or sign loss:
#
#   allowed (src -> dst)          rejected (src -> dst)
#   int    -> float               str    -> int
#   2.0    -> int                 int    -> str
#   <T>    -> Optional[<T>]       bool   -> int
#   None   -> Optional[<T>]       1.5    -> int
#   dict   -> <dataclass>         -1     -> np.uint32
#   2.0    -> NewType(int)        None   -> str
#   "a"    -> Literal["a", "b"]   "c"    -> Literal["a", "b"]
#
# A NewType is checked as its supertype.
#
# Whether a mapping's own fields match a dataclass is not decided here; the
# engine recurses for that.

from __future__ import annotations

import typing
from collections.abc import Mapping
from typing import Any

from mapschema.kinds import (
    TypeKind,
    origin_type,
    type_kind,
    unwrap_newtype,
    unwrap_optional,
    value_kind,
)


def default_can_convert(declared_type: Any, value: Any) -> bool:
    """
    Return whether value is convertible to declared_type.

    None is only convertible to an optional type. For an optional type the
    check continues against its element type.
    """
    optional, target = unwrap_optional(declared_type)
    if value is None:
        return optional
    return _convertible_to(target, value)


def _convertible_to(target: Any, value: Any) -> bool:
    target = unwrap_newtype(target)
    target_kind = type_kind(target)

    if target_kind is TypeKind.ANY:
        return True
    if target_kind is TypeKind.UNION:
        return any(_convertible_to(member, value) for member in typing.get_args(target))
    if target_kind is TypeKind.RECORD:
        return isinstance(value, Mapping)
    if target_kind is TypeKind.LITERAL:
        return any(_literal_matches(arg, value) for arg in typing.get_args(target))

    source_kind = value_kind(value)

    if target_kind.is_numeric:
        if not source_kind.is_numeric:
            return False
        if target_kind.is_integer:
            return _fits_integer(value, source_kind, unsigned=target_kind is TypeKind.UINT)
        return True

    if target_kind is TypeKind.OTHER:
        cls = origin_type(target)
        return isinstance(cls, type) and isinstance(value, cls)

    return source_kind is target_kind


def _literal_matches(arg: Any, value: Any) -> bool:
    # Literal[1] accepts 1.0 but never True.
    arg_kind = value_kind(arg)
    source_kind = value_kind(value)
    if arg_kind.is_numeric and source_kind.is_numeric:
        return bool(arg == value)
    return arg_kind is source_kind and bool(arg == value)


def _fits_integer(value: Any, source_kind: TypeKind, unsigned: bool) -> bool:
    if source_kind is TypeKind.FLOAT:
        # is_integer() is False for nan and +/-inf.
        if not float(value).is_integer():
            return False
    if unsigned and value < 0:
        return False
    return True


__all__ = ["default_can_convert"]
