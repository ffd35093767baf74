# usage_example.py
# Minimal usage example for mapschema/compare.py.
# This file is not part of the mapschema package. For reference only.

import json
import logging
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from mapschema import CompareOptions, compare_map_to_struct, json_field, type_name_simple

logging.basicConfig(level=logging.INFO)


@dataclass
class Address:
    street: str = ""
    city: str = ""


@dataclass
class Person:
    first_name: str = json_field("firstName", default="")
    age: np.uint8 = np.uint8(0)
    nickname: Optional[str] = None
    address: Address = field(default_factory=Address)


# Inputs
document: str = """
{
    "firstName": "Ada",
    "age": -36,
    "nickname": null,
    "address": {"city": 42}
}
"""

# Compute
result = compare_map_to_struct(Person(), json.loads(document))

# Inspect
for mismatch in result.mismatched_fields:
    print(f"mismatched: {mismatch.qualified_name}: {mismatch}")
for missing in result.missing_fields:
    print(f"missing:    {missing}")

errors = result.errors()
if errors is not None:
    print(errors.to_json(indent=2, sort_keys=True))

# Expected output:
# mismatched: age: expected a uint8 but it's an int
# mismatched: address.city: expected a str but it's an int
# missing:    address.street
# {
#   "address": {
#     "city": "expected a str but it's an int"
#   },
#   "age": "expected a uint8 but it's an int"
# }

# Generic type names:
simple = compare_map_to_struct(
    Person(), json.loads(document), CompareOptions(type_name_func=type_name_simple)
)
print(simple.as_map())
# {'age': "expected a uint but it's an int", 'city': "expected a str but it's an int"}

# Precondition errors:
# compare_map_to_struct(123, {})          # InvalidDestinationError
# compare_map_to_struct(Person(), None)   # NilSourceError
# compare_map_to_struct(Person(), [])     # InvalidSourceError
