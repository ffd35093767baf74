# =============================================================================
# mapschema -- EXCEPTION HIERARCHY
# File:   mapschema/exceptions.py
# =============================================================================
#
# SCOPE
# -----
# Exceptions raised at the entry point of the comparison engine, plus
# MismatchError, the nested error view derived from a CompareResult.
# Exceptions are pure value objects: no logging, no I/O.
#
# EXCEPTION HIERARCHY
# -------------------
#   MapSchemaError(Exception)              -- base; never raised directly
#     InvalidDestinationError              -- dst is not a usable dataclass
#     InvalidSourceError                   -- src is not a Mapping
#       NilSourceError                     -- src is None
#     InvalidOptionsError                  -- malformed CompareOptions
#     MismatchError(Mapping)               -- nested mismatch view; returned,
#                                             not raised, by the engine
#
# MESSAGE CONTRACT
# ----------------
# Every message is deterministic and non-empty. Messages about a rejected
# argument name the argument and the type that was received.
# =============================================================================

from __future__ import annotations

import copy
import json
from collections.abc import Mapping
from typing import Any, Dict, Iterator, List, Tuple

from mapschema.constants import PATH_SEPARATOR


# =============================================================================
# BASE EXCEPTION
# =============================================================================

class MapSchemaError(Exception):
    """
    Base class for all mapschema exceptions.

    Attributes:
        message:  Human-readable description. Always non-empty.
        value:    The offending argument, or None when not applicable.
    """

    def __init__(self, message: str, value: Any = None) -> None:
        if not isinstance(message, str) or not message:
            raise ValueError(
                "MapSchemaError: message must be a non-empty string"
            )
        super().__init__(message)
        self.message: str = message
        self.value:   Any = value

    def __repr__(self) -> str:
        return (
            self.__class__.__name__
            + "(message=" + repr(self.message)
            + ", value=" + repr(self.value)
            + ")"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MapSchemaError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.message == other.message
            and self.value == other.value
        )


# =============================================================================
# PRECONDITION FAILURES
# =============================================================================

class InvalidDestinationError(MapSchemaError):
    """
    Raised when dst is not a dataclass instance or dataclass type, or when
    the dataclass cannot be turned into a field-descriptor table (unresolved
    annotations, an embedded field that is not itself a dataclass).

    Message format:
        "dst must be a dataclass instance or type: got <type name>"
        or the explicit reason passed by the caller.
    """

    def __init__(self, value: Any = None, reason: str = "") -> None:
        if not reason:
            reason = (
                "dst must be a dataclass instance or type: got "
                + type(value).__name__
            )
        super().__init__(message=reason, value=value)


class InvalidSourceError(MapSchemaError):
    """Raised when src is not a Mapping of field name to value."""

    def __init__(self, value: Any = None, reason: str = "") -> None:
        if not reason:
            reason = "src must be a mapping: got " + type(value).__name__
        super().__init__(message=reason, value=value)


class NilSourceError(InvalidSourceError):
    """Raised when src is None."""

    def __init__(self) -> None:
        super().__init__(value=None, reason="src must not be None")


class InvalidOptionsError(MapSchemaError):
    """
    Raised by CompareOptions when a hook is neither callable nor None, or
    when tag_key is not a non-empty string.

    Attributes:
        option_name:  Name of the offending option.
    """

    def __init__(self, option_name: str, value: Any, constraint: str) -> None:
        message = (
            "option '"
            + option_name
            + "' "
            + constraint
            + ": got "
            + type(value).__name__
        )
        super().__init__(message=message, value=value)
        self.option_name: str = option_name


# =============================================================================
# NESTED MISMATCH VIEW
# =============================================================================

def _flatten(tree: Mapping, prefix: Tuple[str, ...]) -> List[Tuple[str, Any]]:
    """Return (dotted path, message) pairs for every leaf, depth first."""
    out: List[Tuple[str, Any]] = []
    for key, val in tree.items():
        if isinstance(val, Mapping):
            out.extend(_flatten(val, prefix + (key,)))
        else:
            out.append((PATH_SEPARATOR.join(prefix + (key,)), val))
    return out


class MismatchError(MapSchemaError, Mapping):
    """
    Type mismatches keyed by field name.

    Leaves are message strings. A mismatch found inside a nested record is
    stored under a chain of dicts keyed by each ancestor field name, so
    ``{"Cat": {"A": {"Baz": "expected a str but it's a bool"}}}``.

    Behaves as a read-only mapping over the top-level entries and compares
    equal to any mapping with the same content.
    """

    def __init__(self, errors: Mapping) -> None:
        if not isinstance(errors, Mapping) or not errors:
            raise ValueError(
                "MismatchError: errors must be a non-empty mapping"
            )
        self._errors: Dict[str, Any] = copy.deepcopy(dict(errors))
        message = ", ".join(
            path + ": " + str(msg) for path, msg in _flatten(self._errors, ())
        )
        super().__init__(message=message, value=None)

    def __getitem__(self, key: str) -> Any:
        return self._errors[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        return self.as_dict() == dict(other.items())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return "MismatchError(" + repr(self._errors) + ")"

    def as_dict(self) -> Dict[str, Any]:
        """Deep copy of the nested error tree."""
        return copy.deepcopy(self._errors)

    def to_json(self, **kwargs: Any) -> str:
        """Serialize the nested error tree with json.dumps."""
        return json.dumps(self._errors, **kwargs)


__all__ = [
    "MapSchemaError",
    "InvalidDestinationError",
    "InvalidSourceError",
    "NilSourceError",
    "InvalidOptionsError",
    "MismatchError",
]
