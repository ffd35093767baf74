# =============================================================================
# mapschema -- FIELD DESCRIPTORS
# File:   mapschema/fields.py
# =============================================================================
#
# SCOPE
# -----
# Turns a dataclass into an ordered table of FieldDescriptor values and
# resolves each field's external name from its tag.
#
# TAG SUB-LANGUAGE
# ----------------
#   (no tag) or ""     -> declared attribute name
#   "-"                -> field skipped entirely
#   "name,opts..."     -> "name"
#   ",opts..."         -> declared attribute name
#   "-,"               -> "-" (NOT skipped; skip needs the bare sentinel)
#   anything else      -> used verbatim
#
# Tags and the embedded flag live in dataclasses.field(metadata=...):
#
#   @dataclass
#   class Person:
#       first_name: str = json_field("first_name")
#       base: Base = embedded_field(default_factory=Base)
#       secret: str = json_field("-", default="")
# =============================================================================

from __future__ import annotations

import dataclasses
import typing
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from mapschema.constants import EMBEDDED_KEY, SKIP_SENTINEL, TAG_KEY, TAG_SEPARATOR
from mapschema.exceptions import InvalidDestinationError


@dataclass(frozen=True)
class FieldDescriptor:
    """
    One field of a record type.

    Fields
    ------
    name          : Declared attribute name.
    declared_type : Resolved annotation.
    tag           : External-name tag, or None when the field carries none.
    embedded      : True if the field's own fields are inlined into the parent.
    """
    name:          str
    declared_type: Any
    tag:           Optional[str] = None
    embedded:      bool = False

    @property
    def external_name(self) -> str:
        return parse_tag(self.name, self.tag)[0]

    @property
    def skipped(self) -> bool:
        return parse_tag(self.name, self.tag)[1]


def parse_tag(field_name: str, tag: Optional[str]) -> Tuple[str, bool]:
    """
    Resolve a field's external name.

    Returns (name, skip). When skip is True the name is "".
    """
    if not tag:
        return field_name, False
    if tag == SKIP_SENTINEL:
        return "", True
    head, sep, _ = tag.partition(TAG_SEPARATOR)
    if sep:
        return (head or field_name), False
    return tag, False


def describe_fields(record_type: type, tag_key: str = TAG_KEY) -> Tuple[FieldDescriptor, ...]:
    """
    Build the descriptor table of a dataclass, in declaration order.

    Raises InvalidDestinationError if record_type is not a dataclass or its
    annotations cannot be resolved.
    """
    if not (isinstance(record_type, type) and dataclasses.is_dataclass(record_type)):
        raise InvalidDestinationError(record_type)
    try:
        hints = typing.get_type_hints(record_type)
    except (NameError, TypeError) as exc:
        raise InvalidDestinationError(
            record_type,
            reason=(
                "cannot resolve field types of "
                + record_type.__name__
                + ": "
                + str(exc)
            ),
        ) from exc

    descriptors = []
    for f in dataclasses.fields(record_type):
        tag = f.metadata.get(tag_key)
        if tag is not None and not isinstance(tag, str):
            raise InvalidDestinationError(
                record_type,
                reason=(
                    "tag of field '"
                    + f.name
                    + "' must be a string: got "
                    + type(tag).__name__
                ),
            )
        descriptors.append(FieldDescriptor(
            name=f.name,
            declared_type=hints.get(f.name, f.type),
            tag=tag,
            embedded=bool(f.metadata.get(EMBEDDED_KEY, False)),
        ))
    return tuple(descriptors)


def json_field(tag: str, **kwargs: Any) -> Any:
    """dataclasses.field() carrying an external-name tag."""
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[TAG_KEY] = tag
    return dataclasses.field(metadata=metadata, **kwargs)


def embedded_field(**kwargs: Any) -> Any:
    """dataclasses.field() whose record type is inlined into the parent."""
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[EMBEDDED_KEY] = True
    return dataclasses.field(metadata=metadata, **kwargs)


__all__ = [
    "FieldDescriptor",
    "parse_tag",
    "describe_fields",
    "json_field",
    "embedded_field",
]
