# =============================================================================
# mapschema -- COMPARISON ENGINE
# File:   mapschema/compare.py
# =============================================================================
#
# SCOPE
# -----
# compare_map_to_struct() walks the fields of a dataclass and checks each one
# against a source mapping (typically the output of json.loads):
#
#   key absent                        -> FieldMissing
#   predicate rejects the value       -> FieldMismatch
#   record field, value is a mapping  -> recurse, path extended by the field
#   otherwise                         -> nothing reported
#
# Embedded fields are walked in place with no extra path segment, as if
# their fields were declared on the parent. Nothing is reported below a
# missing or mismatched field.
#
# ERRORS
# ------
# Only the preconditions raise (InvalidDestinationError, NilSourceError,
# InvalidSourceError). Everything else accumulates in the result.
#
# STATE
# -----
# Each call owns its accumulators. dst, src and opts are only read.
# =============================================================================

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from typing import Any, List, Optional, Tuple

from mapschema.constants import NULL_TYPE_NAME
from mapschema.domain import (
    CompareOptions,
    CompareResult,
    FieldMismatch,
    FieldMissing,
    resolve_options,
)
from mapschema.exceptions import InvalidDestinationError, InvalidSourceError, NilSourceError
from mapschema.fields import FieldDescriptor, describe_fields
from mapschema.kinds import is_record_type, unwrap_newtype, unwrap_optional

logger = logging.getLogger(__name__)


def compare_map_to_struct(
    dst: Any,
    src: Optional[Mapping],
    opts: Optional[CompareOptions] = None,
) -> CompareResult:
    """
    Compare a source mapping against the fields of a dataclass.

    dst is a dataclass instance or a dataclass type. It is only inspected,
    never populated. The external name of each field is its attribute name,
    or the name given by its tag (see mapschema.fields).

    A type mismatch is a value that cannot be assigned to the field's type
    without parsing, truncation or sign loss (see default_can_convert, or the
    hook given in opts).

    Raises:
        InvalidDestinationError: dst is not a dataclass instance or type.
        NilSourceError:          src is None.
        InvalidSourceError:      src is not a Mapping.
    """
    options = resolve_options(opts)
    record_type = _destination_type(dst)

    if src is None:
        raise NilSourceError()
    if not isinstance(src, Mapping):
        raise InvalidSourceError(src)

    walker = _FieldWalker(options)
    walker.walk(record_type, src, ())

    result = CompareResult(
        mismatched_fields=tuple(walker.mismatched),
        missing_fields=tuple(walker.missing),
    )
    logger.debug(
        "Compared %s: %d mismatched, %d missing",
        record_type.__name__,
        len(result.mismatched_fields),
        len(result.missing_fields),
    )
    return result


def _destination_type(dst: Any) -> type:
    if dst is None:
        raise InvalidDestinationError(dst)
    if isinstance(dst, type):
        if is_record_type(dst):
            return dst
        raise InvalidDestinationError(
            dst, reason="dst must be a dataclass instance or type: got class " + dst.__name__
        )
    if dataclasses.is_dataclass(dst):
        return type(dst)
    raise InvalidDestinationError(dst)


class _FieldWalker:
    """Depth-first walk over one destination type, accumulating entries."""

    def __init__(self, options: CompareOptions) -> None:
        self.options = options
        self.mismatched: List[FieldMismatch] = []
        self.missing: List[FieldMissing] = []

    def walk(self, record_type: type, src: Mapping, path: Tuple[str, ...]) -> None:
        for desc in describe_fields(record_type, self.options.tag_key):
            if desc.skipped:
                logger.debug("Skipping field %s.%s", record_type.__name__, desc.name)
                continue

            if desc.embedded:
                self.walk(self._embedded_type(record_type, desc), src, path)
                continue

            name = desc.external_name
            if name not in src:
                self.missing.append(FieldMissing(field=name, path=path))
                continue

            value = src[name]
            if not self.options.convertible_func(desc.declared_type, value):
                self.mismatched.append(FieldMismatch(
                    field=name,
                    expected=self.options.type_name_func(desc.declared_type),
                    actual=self._observed_type_name(value),
                    path=path,
                ))
                continue

            elem = unwrap_newtype(unwrap_optional(desc.declared_type)[1])
            if not is_record_type(elem) or value is None:
                continue
            if not isinstance(value, Mapping):
                # Only reachable through a custom convertible_func.
                logger.debug(
                    "Field %s accepted a non-mapping %s for record %s; not descending",
                    name,
                    type(value).__name__,
                    elem.__name__,
                )
                continue

            logger.debug("Descending into %s as %s", name, elem.__name__)
            self.walk(elem, value, path + (name,))

    def _observed_type_name(self, value: Any) -> str:
        if value is None:
            return NULL_TYPE_NAME
        return self.options.type_name_func(type(value))

    @staticmethod
    def _embedded_type(parent: type, desc: FieldDescriptor) -> type:
        elem = unwrap_newtype(unwrap_optional(desc.declared_type)[1])
        if not is_record_type(elem):
            raise InvalidDestinationError(
                parent,
                reason=(
                    "embedded field '"
                    + desc.name
                    + "' of "
                    + parent.__name__
                    + " must be a dataclass"
                ),
            )
        return elem


__all__ = ["compare_map_to_struct"]
