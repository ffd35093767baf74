import json

import pytest


@pytest.fixture
def from_json():
    """
    Decode a JSON document the way the comparison engine expects its input:
    objects become dicts, null becomes None and every number becomes a float.
    """
    def _load(text: str) -> dict:
        return json.loads(text, parse_int=float)
    return _load
