# =============================================================================
# mapschema -- DOMAIN TYPES
# File:   mapschema/domain.py
# =============================================================================
#
# SCOPE
# -----
# Frozen value types produced and consumed by compare_map_to_struct():
#   FieldMismatch, FieldMissing  -- one result entry each
#   CompareResult                -- ordered entries plus derived views
#   CompareOptions               -- pluggable hooks, defaulted per hook
#
# INVARIANTS
# ----------
# INV-01  Entries are ordered by traversal, never sorted.
# INV-02  A field never appears in both mismatched_fields and missing_fields.
# INV-03  path holds ancestor external names, outermost first, and excludes
#         the field itself.
# INV-04  CompareOptions is frozen. resolved() returns a new instance; the
#         caller's instance is never modified.
# INV-05  errors() is None whenever mismatched_fields is empty, however many
#         fields are missing.
# =============================================================================

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple

from mapschema.constants import TAG_KEY
from mapschema.convert import default_can_convert
from mapschema.exceptions import InvalidOptionsError, MismatchError
from mapschema.naming import format_path, type_name_detailed, type_name_with_article

# (declared type, source value) -> bool
ConvertibleFunc = Callable[[Any, Any], bool]

# (type) -> display name
TypeNameFunc = Callable[[Any], str]


# =============================================================================
# SECTION 1 -- RESULT ENTRIES
# =============================================================================

@dataclass(frozen=True)
class FieldMismatch:
    """
    A field whose source value cannot be converted to the declared type.

    Fields
    ------
    field    : External name of the field.
    expected : Display name of the declared type.
    actual   : Display name of the source value's type, or "null".
    path     : Ancestor external names, outermost first.
    """
    field:    str
    expected: str
    actual:   str
    path:     Tuple[str, ...] = ()

    @property
    def qualified_name(self) -> str:
        return format_path(self.field, self.path)

    @property
    def message(self) -> str:
        return (
            "expected "
            + type_name_with_article(self.expected)
            + " but it's "
            + type_name_with_article(self.actual)
        )

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class FieldMissing:
    """A field of the destination with no key in the source."""
    field: str
    path:  Tuple[str, ...] = ()

    @property
    def qualified_name(self) -> str:
        return format_path(self.field, self.path)

    def __str__(self) -> str:
        return self.qualified_name


# =============================================================================
# SECTION 2 -- RESULT
# =============================================================================

@dataclass(frozen=True)
class CompareResult:
    """
    Outcome of one compare_map_to_struct() call.

    Fields
    ------
    mismatched_fields : FieldMismatch entries in traversal order.
    missing_fields    : FieldMissing entries in traversal order.
    """
    mismatched_fields: Tuple[FieldMismatch, ...] = ()
    missing_fields:    Tuple[FieldMissing, ...] = ()

    @property
    def ok(self) -> bool:
        """True when nothing is missing and nothing mismatched."""
        return not self.mismatched_fields and not self.missing_fields

    def as_map(self) -> Dict[str, str]:
        """
        Flat {field: message} view of the mismatches.

        Paths are dropped, so two nested fields sharing a bare name collapse
        into one entry (the later one wins). Use errors() for a path-aware
        view.
        """
        return {m.field: m.message for m in self.mismatched_fields}

    def errors(self) -> Optional[MismatchError]:
        """
        Nested error view of the mismatches, or None if there are none.

        Missing fields never produce an error here. If a mismatch's path runs
        through a name that already holds a message (two embedded records
        sharing an external name), the message is replaced by the subtree.
        """
        if not self.mismatched_fields:
            return None

        tree: Dict[str, Any] = {}
        for m in self.mismatched_fields:
            node = tree
            for segment in m.path:
                child = node.get(segment)
                if not isinstance(child, dict):
                    child = {}
                    node[segment] = child
                node = child
            node[m.field] = m.message
        return MismatchError(tree)


# =============================================================================
# SECTION 3 -- OPTIONS
# =============================================================================

@dataclass(frozen=True)
class CompareOptions:
    """
    Configuration of compare_map_to_struct().

    Fields
    ------
    convertible_func : (declared type, value) -> bool. None selects
                       default_can_convert.
    type_name_func   : (type) -> str, used for both expected and actual
                       names. None selects type_name_detailed.
    tag_key          : dataclasses.field metadata key holding the
                       external-name tag.

    Each hook defaults on its own: supplying only one keeps it and defaults
    the other.
    """
    convertible_func: Optional[ConvertibleFunc] = None
    type_name_func:   Optional[TypeNameFunc] = None
    tag_key:          str = TAG_KEY

    def __post_init__(self) -> None:
        if self.convertible_func is not None and not callable(self.convertible_func):
            raise InvalidOptionsError(
                "convertible_func", self.convertible_func, "must be callable or None"
            )
        if self.type_name_func is not None and not callable(self.type_name_func):
            raise InvalidOptionsError(
                "type_name_func", self.type_name_func, "must be callable or None"
            )
        if not isinstance(self.tag_key, str) or not self.tag_key:
            raise InvalidOptionsError(
                "tag_key", self.tag_key, "must be a non-empty string"
            )

    def resolved(self) -> "CompareOptions":
        """Return a copy with every unset hook replaced by its default."""
        return dataclasses.replace(
            self,
            convertible_func=(
                default_can_convert if self.convertible_func is None
                else self.convertible_func
            ),
            type_name_func=(
                type_name_detailed if self.type_name_func is None
                else self.type_name_func
            ),
        )


def resolve_options(opts: Optional[CompareOptions]) -> CompareOptions:
    if opts is None:
        return CompareOptions().resolved()
    if not isinstance(opts, CompareOptions):
        raise InvalidOptionsError("opts", opts, "must be a CompareOptions or None")
    return opts.resolved()


__all__ = [
    "ConvertibleFunc",
    "TypeNameFunc",
    "FieldMismatch",
    "FieldMissing",
    "CompareResult",
    "CompareOptions",
    "resolve_options",
]
