# =============================================================================
# mapschema -- DEFAULT CONVERTIBILITY TESTS
# File:   tests/unit/convert/test_convert.py
# =============================================================================

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Literal, NewType, Optional, Tuple, Union

import numpy as np
import pytest

from mapschema.convert import default_can_convert


@dataclass
class Address:
    city: str = ""


UserId = NewType("UserId", int)
Count = NewType("Count", np.uint32)
Label = NewType("Label", str)
AddressRef = NewType("AddressRef", Address)


class TestNull:

    @pytest.mark.parametrize("t", [str, int, float, bool, Address, Any, dict, list])
    def test_null_rejected_by_non_optional(self, t):
        assert default_can_convert(t, None) is False

    @pytest.mark.parametrize("t", [
        Optional[str], Optional[int], Optional[Address], Optional[Any], str | None,
    ])
    def test_null_accepted_by_optional(self, t):
        assert default_can_convert(t, None) is True


class TestScalars:

    @pytest.mark.parametrize("t, value, expected", [
        (str, "x", True),
        (str, 0.0, False),
        (str, True, False),
        (bool, True, True),
        (bool, 1.0, False),
        (bool, "true", False),
        (float, 3.14, True),
        (float, 3, True),
        (float, True, False),
        (float, "3.14", False),
        (float, math.inf, True),
        (np.float32, 1.5, True),
    ])
    def test_table(self, t, value, expected):
        assert default_can_convert(t, value) is expected

    def test_optional_checks_element_type(self):
        assert default_can_convert(Optional[str], "hi") is True
        assert default_can_convert(Optional[str], 0.0) is False


class TestIntegers:

    @pytest.mark.parametrize("t, value, expected", [
        (int, 2.0, True),
        (int, 1.5, False),
        (int, 2, True),
        (int, -2.0, True),
        (int, True, False),
        (int, "1", False),
        (int, math.inf, False),
        (int, math.nan, False),
        (np.int8, -1.0, True),
        (np.int32, np.float64(3.0), True),
        (np.int32, np.float32(3.5), False),
    ])
    def test_signed(self, t, value, expected):
        assert default_can_convert(t, value) is expected

    @pytest.mark.parametrize("t, value, expected", [
        (np.uint32, -1.0, False),
        (np.uint32, -1, False),
        (np.uint32, 0.0, True),
        (np.uint32, 1.0, True),
        (np.uint32, 1, True),
        (np.uint8, 1.5, False),
        (np.uint64, np.int64(-3), False),
        (Optional[np.uint16], -1.0, False),
    ])
    def test_unsigned(self, t, value, expected):
        assert default_can_convert(t, value) is expected


class TestRecords:

    def test_mapping_accepted(self):
        assert default_can_convert(Address, {}) is True
        assert default_can_convert(Address, {"city": 1.0}) is True

    def test_non_mapping_rejected(self):
        assert default_can_convert(Address, "x") is False
        assert default_can_convert(Address, []) is False

    def test_optional_record(self):
        assert default_can_convert(Optional[Address], {"city": "x"}) is True
        assert default_can_convert(Optional[Address], 1.0) is False


class TestContainers:

    @pytest.mark.parametrize("t, value, expected", [
        (Dict[str, Any], {}, True),
        (dict, {"a": 1.0}, True),
        (dict, [], False),
        (List[int], ["a"], True),
        (list, [], True),
        (list, "abc", False),
        (list, {}, False),
        (Tuple[int, ...], [], True),
    ])
    def test_table(self, t, value, expected):
        assert default_can_convert(t, value) is expected


class TestOtherForms:

    def test_any_accepts_every_value(self):
        for value in ("x", 1.0, True, {}, []):
            assert default_can_convert(Any, value) is True

    def test_union_accepts_if_any_member_does(self):
        assert default_can_convert(Union[int, str], "x") is True
        assert default_can_convert(Union[int, str], 2.0) is True
        assert default_can_convert(Union[int, str], 1.5) is False
        assert default_can_convert(Union[int, str], True) is False

    def test_other_class_uses_isinstance(self):
        assert default_can_convert(datetime, "2020-01-01") is False
        assert default_can_convert(datetime, datetime(2020, 1, 1)) is True


class TestNewType:

    @pytest.mark.parametrize("t, value, expected", [
        (UserId, 5.0, True),
        (UserId, 5, True),
        (UserId, 5.5, False),
        (UserId, True, False),
        (UserId, "5", False),
        (Count, -1.0, False),
        (Count, 3.0, True),
        (Label, "x", True),
        (Label, 1.0, False),
        (AddressRef, {"city": "x"}, True),
        (AddressRef, "x", False),
    ])
    def test_checked_as_supertype(self, t, value, expected):
        assert default_can_convert(t, value) is expected

    def test_optional_newtype(self):
        assert default_can_convert(Optional[UserId], None) is True
        assert default_can_convert(Optional[UserId], 2.0) is True


class TestLiteral:

    @pytest.mark.parametrize("t, value, expected", [
        (Literal["a", "b"], "a", True),
        (Literal["a", "b"], "c", False),
        (Literal["a", "b"], 1.0, False),
        (Literal[1, 2], 1.0, True),
        (Literal[1, 2], 1, True),
        (Literal[1, 2], 3.0, False),
        (Literal[1, 2], True, False),
        (Literal[1, 2], "1", False),
        (Literal[True], True, True),
        (Literal[True], 1.0, False),
        (Optional[Literal["a"]], None, True),
    ])
    def test_member_check(self, t, value, expected):
        assert default_can_convert(t, value) is expected
