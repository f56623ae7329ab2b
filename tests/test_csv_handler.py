import csv

from csv_handler import export_report_to_csv
from models import BillOutput, PersonItem


def test_export_report_to_csv(tmp_path):
    output = BillOutput(
        date="2024年3月21日",
        location="Pizza Place",
        sub_total=20.0,
        tip=2.0,
        total_amount=22.0,
        items=[PersonItem("A", 11.1), PersonItem("B", 10.9)],
    )
    path = tmp_path / "report.csv"
    export_report_to_csv(output, str(path))

    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))

    assert rows == [
        ["field", "value"],
        ["date", "2024年3月21日"],
        ["location", "Pizza Place"],
        ["subTotal", "20.00"],
        ["tip", "2.00"],
        ["totalAmount", "22.00"],
        [],
        ["name", "amount"],
        ["A", "11.10"],
        ["B", "10.90"],
    ]
