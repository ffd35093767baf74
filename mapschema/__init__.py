# mapschema/__init__.py
# Version: 1.0.0

from mapschema.exceptions import (
    MapSchemaError,
    InvalidDestinationError,
    InvalidSourceError,
    NilSourceError,
    InvalidOptionsError,
    MismatchError,
)
from mapschema.kinds import TypeKind
from mapschema.naming import (
    type_name_detailed,
    type_name_simple,
    type_name_starts_with_vowel,
    type_name_with_article,
    format_path,
)
from mapschema.fields import (
    FieldDescriptor,
    describe_fields,
    embedded_field,
    json_field,
    parse_tag,
)
from mapschema.convert import default_can_convert
from mapschema.domain import (
    CompareOptions,
    CompareResult,
    ConvertibleFunc,
    FieldMismatch,
    FieldMissing,
    TypeNameFunc,
)
from mapschema.compare import compare_map_to_struct

__version__ = "1.0.0"

__all__ = [
    # Exceptions
    "MapSchemaError",
    "InvalidDestinationError",
    "InvalidSourceError",
    "NilSourceError",
    "InvalidOptionsError",
    "MismatchError",
    # Type naming
    "TypeKind",
    "type_name_detailed",
    "type_name_simple",
    "type_name_starts_with_vowel",
    "type_name_with_article",
    "format_path",
    # Field descriptors
    "FieldDescriptor",
    "describe_fields",
    "embedded_field",
    "json_field",
    "parse_tag",
    # Comparison
    "default_can_convert",
    "CompareOptions",
    "CompareResult",
    "ConvertibleFunc",
    "FieldMismatch",
    "FieldMissing",
    "TypeNameFunc",
    "compare_map_to_struct",
]
