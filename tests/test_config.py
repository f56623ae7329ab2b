import json
import math
import re

import pytest

from computations import split_bill
from config import (
    BillFileError,
    BillSplitError,
    BillValidationError,
    bill_output_to_dict,
    default_log_level,
    dict_to_bill_input,
    dict_to_bill_output,
    load_bill,
)
from models import BillItem


def test_dict_to_bill_input(pizza_bill):
    bill = dict_to_bill_input(pizza_bill)

    assert bill.date == "2024-03-21"
    assert bill.location == "Pizza Place"
    assert bill.tip_percentage == 10.0
    assert bill.items[0] == BillItem(name="Pizza", price=20.0, is_shared=True, person=None)
    assert bill.items[1] == BillItem(name="Water", price=0.0, is_shared=False, person="A")


def test_shared_item_person_is_ignored(pizza_bill):
    pizza_bill["items"][0]["person"] = "A"
    assert dict_to_bill_input(pizza_bill).items[0].person is None


@pytest.mark.parametrize("mutate, message", [
    (lambda d: d.pop("date"), "Missing or invalid date field"),
    (lambda d: d.update(date=20240321), "Missing or invalid date field"),
    (lambda d: d.update(location=""), "Missing or invalid location field"),
    (lambda d: d.update(tipPercentage=-1), "Missing or invalid tipPercentage field"),
    (lambda d: d.update(tipPercentage="10"), "Missing or invalid tipPercentage field"),
    (lambda d: d.update(tipPercentage=True), "Missing or invalid tipPercentage field"),
    (lambda d: d.update(tipPercentage=math.nan), "Missing or invalid tipPercentage field"),
    (lambda d: d.update(items=[]), "Missing or invalid items field (must be a non-empty array)"),
    (lambda d: d.update(items={"name": "Pizza"}), "Missing or invalid items field (must be a non-empty array)"),
    (lambda d: d["items"].append("Pizza"), "Item 3 must be an object"),
    (lambda d: d["items"][0].pop("name"), "Item 0 missing or invalid name field"),
    (lambda d: d["items"][1].update(price=-0.5), "Item 1 missing or invalid price field"),
    (lambda d: d["items"][1].update(price=False), "Item 1 missing or invalid price field"),
    (lambda d: d["items"][1].update(price=10 ** 400), "Item 1 missing or invalid price field"),
    (lambda d: d.update(tipPercentage=10 ** 400), "Missing or invalid tipPercentage field"),
    (lambda d: d["items"][0].update(price=1e308), "Bill total is too large"),
    (lambda d: d["items"][2].update(isShared="no"), "Item 2 missing or invalid isShared field"),
    (lambda d: d["items"][2].pop("person"), "Item 2 missing or invalid person field for personal item"),
])
def test_dict_to_bill_input_rejects(pizza_bill, mutate, message):
    mutate(pizza_bill)
    with pytest.raises(BillValidationError, match=re.escape(message)):
        dict_to_bill_input(pizza_bill)


def test_input_must_be_object():
    with pytest.raises(BillValidationError, match="Input data must be an object"):
        dict_to_bill_input([1, 2, 3])


def test_validation_error_is_value_error():
    assert issubclass(BillValidationError, ValueError)
    assert issubclass(BillValidationError, BillSplitError)


def test_load_bill(pizza_bill, write_bill):
    path = write_bill(pizza_bill)
    assert load_bill(path) == dict_to_bill_input(pizza_bill)


def test_load_bill_missing_file(tmp_path):
    path = str(tmp_path / "nope.json")
    with pytest.raises(BillFileError, match="File not found: ") as exc:
        load_bill(path)
    assert isinstance(exc.value, OSError)
    assert str(exc.value) == f"File not found: {path}"


def test_load_bill_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(BillFileError, match="Invalid JSON format: "):
        load_bill(str(path))


def test_load_bill_validates(write_bill):
    path = write_bill({"date": "2024-03-21"})
    with pytest.raises(BillValidationError, match="Missing or invalid location field"):
        load_bill(path)


def test_output_document_round_trip(pizza_bill):
    output = split_bill(dict_to_bill_input(pizza_bill))
    doc = bill_output_to_dict(output)

    assert doc == {
        "date": "2024年3月21日",
        "location": "Pizza Place",
        "subTotal": 20.0,
        "tip": 2.0,
        "totalAmount": 22.0,
        "items": [{"name": "A", "amount": 11.0}, {"name": "B", "amount": 11.0}],
    }
    assert dict_to_bill_output(json.loads(json.dumps(doc))) == output


def test_default_log_level(monkeypatch):
    monkeypatch.delenv("BILL_SPLIT_LOG_LEVEL", raising=False)
    assert default_log_level() == "INFO"
    monkeypatch.setenv("BILL_SPLIT_LOG_LEVEL", "debug")
    assert default_log_level() == "DEBUG"


def test_bill_total_overflow_is_rejected(pizza_bill):
    pizza_bill["items"][1]["price"] = 1e308
    pizza_bill["items"][2]["price"] = 1e308
    with pytest.raises(BillValidationError, match="Bill total is too large"):
        dict_to_bill_input(pizza_bill)


def test_tip_overflow_is_rejected(pizza_bill):
    pizza_bill["items"][0]["price"] = 1e306
    pizza_bill["tipPercentage"] = 1e10
    with pytest.raises(BillValidationError, match="Bill total is too large"):
        dict_to_bill_input(pizza_bill)


def test_unknown_env_log_level_falls_back(monkeypatch):
    monkeypatch.setenv("BILL_SPLIT_LOG_LEVEL", "verbose")
    assert default_log_level() == "INFO"
    monkeypatch.setenv("BILL_SPLIT_LOG_LEVEL", "critical")
    assert default_log_level() == "CRITICAL"
