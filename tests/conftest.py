import json

import pytest


@pytest.fixture
def pizza_bill():
    """One shared pizza, two participants with zero-priced personal items"""
    return {
        "date": "2024-03-21",
        "location": "Pizza Place",
        "tipPercentage": 10,
        "items": [
            {"name": "Pizza", "price": 20, "isShared": True},
            {"name": "Water", "price": 0, "isShared": False, "person": "A"},
            {"name": "Water", "price": 0, "isShared": False, "person": "B"},
        ],
    }


@pytest.fixture
def write_bill(tmp_path):
    """Write a bill document to tmp_path and return its path"""
    def _write(data, name="bill.json", directory=None):
        path = (directory or tmp_path) / name
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return str(path)
    return _write
