"""
CSV export functionality for SplitBill
"""
from __future__ import annotations
import csv

from models import BillOutput


def export_report_to_csv(output: BillOutput, filepath: str) -> None:
    """
    Export a split report to CSV file
    Layout: field,value rows for the bill totals, a blank row, then name,amount rows
    """
    with open(filepath, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(['field', 'value'])
        writer.writerow(['date', output.date])
        writer.writerow(['location', output.location])
        writer.writerow(['subTotal', f"{output.sub_total:.2f}"])
        writer.writerow(['tip', f"{output.tip:.2f}"])
        writer.writerow(['totalAmount', f"{output.total_amount:.2f}"])
        writer.writerow([])

        writer.writerow(['name', 'amount'])
        for p in output.items:
            writer.writerow([p.name, f"{p.amount:.2f}"])
