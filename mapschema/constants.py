# mapschema/constants.py
# Version: 1.0.0
#
# Standard import pattern:
#   from mapschema.constants import (
#       TAG_KEY,
#       EMBEDDED_KEY,
#       SKIP_SENTINEL,
#       NULL_TYPE_NAME,
#       POINTER_PREFIX,
#   )
#
# Read-only. Nothing in the package assigns to these names at runtime.


# ---------------------------------------------------------------------------
# FIELD METADATA KEYS
# ---------------------------------------------------------------------------

# dataclasses.field(metadata=...) key holding the external-name tag.
TAG_KEY:      str = "json"

# dataclasses.field(metadata=...) key marking an inlined (embedded) record.
EMBEDDED_KEY: str = "embedded"


# ---------------------------------------------------------------------------
# EXTERNAL-NAME TAG SUB-LANGUAGE
# ---------------------------------------------------------------------------

# A tag equal to this exact string removes the field from comparison.
# "-," is NOT the sentinel; it names the field "-".
SKIP_SENTINEL:  str = "-"

# Separator between the external name and trailing options ("name,omitempty").
TAG_SEPARATOR:  str = ","


# ---------------------------------------------------------------------------
# DISPLAY
# ---------------------------------------------------------------------------

NULL_TYPE_NAME: str = "null"     # observed type name of a null source value
POINTER_PREFIX: str = "*"        # prefix of optional type names ("*str")
PATH_SEPARATOR: str = "."

# "u" is deliberately absent: "a uint", "a user".
ARTICLE_VOWELS: frozenset = frozenset({"a", "e", "i", "o"})
