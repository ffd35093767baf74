import dataclasses
from dataclasses import dataclass, field
from typing import Optional

import pytest

from mapschema.constants import EMBEDDED_KEY, TAG_KEY
from mapschema.exceptions import InvalidDestinationError
from mapschema.fields import (
    FieldDescriptor,
    describe_fields,
    embedded_field,
    json_field,
    parse_tag,
)


@dataclass
class Base:
    foo: str = ""
    bar: int = 0


@dataclass
class Child(Base):
    baz: float = 0.0


@dataclass
class Tagged:
    lowercase_a: str = json_field("a", default="")
    ignore_me: str = json_field("-", default="")
    with_options: str = json_field(",omitempty", default="")
    hyphen: str = json_field("-,", default="")
    base: Base = embedded_field(default_factory=Base)


@dataclass
class StringAnnotations:
    count: "Optional[int]" = None
    child: "Optional[StringAnnotations]" = None


@dataclass
class Unresolvable:
    thing: "DoesNotExist" = None  # noqa: F821


@dataclass
class BadTag:
    value: str = field(default="", metadata={TAG_KEY: 5})


@dataclass
class CustomKey:
    value: str = field(default="", metadata={"yaml": "val", TAG_KEY: "json_val"})


# =============================================================================
# SECTION 1 -- Tag parsing
# =============================================================================

class TestParseTag:

    @pytest.mark.parametrize("tag, expected", [
        (None, ("Field", False)),
        ("", ("Field", False)),
        ("-", ("", True)),
        ("a", ("a", False)),
        ("a,omitempty", ("a", False)),
        (",omitempty", ("Field", False)),
        ("-,", ("-", False)),
        ("-,omitempty", ("-", False)),
        ("a,b,c", ("a", False)),
    ])
    def test_tag_table(self, tag, expected):
        assert parse_tag("Field", tag) == expected

    def test_only_bare_sentinel_skips(self):
        assert parse_tag("Field", " -")[1] is False
        assert parse_tag("Field", "--")[1] is False


# =============================================================================
# SECTION 2 -- Descriptor tables
# =============================================================================

class TestDescribeFields:

    def test_declaration_order_base_first(self):
        names = [d.name for d in describe_fields(Child)]
        assert names == ["foo", "bar", "baz"]

    def test_declared_types(self):
        types = [d.declared_type for d in describe_fields(Child)]
        assert types == [str, int, float]

    def test_tags_and_external_names(self):
        descs = {d.name: d for d in describe_fields(Tagged)}
        assert descs["lowercase_a"].external_name == "a"
        assert descs["ignore_me"].skipped is True
        assert descs["with_options"].external_name == "with_options"
        assert descs["hyphen"].external_name == "-"
        assert descs["hyphen"].skipped is False

    def test_embedded_flag(self):
        descs = {d.name: d for d in describe_fields(Tagged)}
        assert descs["base"].embedded is True
        assert descs["lowercase_a"].embedded is False

    def test_string_annotations_are_resolved(self):
        descs = describe_fields(StringAnnotations)
        assert descs[0].declared_type == Optional[int]
        assert descs[1].declared_type == Optional[StringAnnotations]

    def test_unresolvable_annotation_raises(self):
        with pytest.raises(InvalidDestinationError, match="cannot resolve"):
            describe_fields(Unresolvable)

    def test_non_string_tag_raises(self):
        with pytest.raises(InvalidDestinationError, match="must be a string"):
            describe_fields(BadTag)

    def test_non_dataclass_raises(self):
        with pytest.raises(InvalidDestinationError):
            describe_fields(dict)

    def test_custom_tag_key(self):
        assert describe_fields(CustomKey, tag_key="yaml")[0].external_name == "val"
        assert describe_fields(CustomKey)[0].external_name == "json_val"

    def test_descriptor_is_frozen(self):
        desc = FieldDescriptor(name="x", declared_type=int)
        with pytest.raises(dataclasses.FrozenInstanceError):
            desc.name = "y"  # type: ignore


# =============================================================================
# SECTION 3 -- Field helpers
# =============================================================================

class TestFieldHelpers:

    def test_json_field_sets_tag(self):
        f = json_field("first_name", default="")
        assert f.metadata[TAG_KEY] == "first_name"
        assert f.default == ""

    def test_json_field_keeps_other_metadata(self):
        f = json_field("x", default=0, metadata={"doc": "an x"})
        assert f.metadata == {"doc": "an x", TAG_KEY: "x"}

    def test_embedded_field_sets_flag(self):
        f = embedded_field(default_factory=Base)
        assert f.metadata[EMBEDDED_KEY] is True
        assert f.default_factory is Base
