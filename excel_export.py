"""
Excel export functionality for SplitBill
"""
from __future__ import annotations
from typing import List

from openpyxl import Workbook
from openpyxl.styles import Font, Alignment, PatternFill, Border, Side
from openpyxl.worksheet.worksheet import Worksheet

from models import BillOutput

MONEY_FORMAT = "0.00"
_THIN = Side(style="thin", color="A0A0A0")
_HEADER_FONT = Font(bold=True, color="FFFFFF")
_HEADER_FILL = PatternFill("solid", fgColor="4F81BD")
_HEADER_BORDER = Border(left=_THIN, right=_THIN, top=_THIN, bottom=_THIN)


def _new_sheet(wb: Workbook, title: str, headers: List[str]) -> Worksheet:
    """Create a sheet whose first row is a styled, frozen header"""
    ws = wb.create_sheet(title)
    ws.append(headers)
    for cell in ws[1]:
        cell.font = _HEADER_FONT
        cell.fill = _HEADER_FILL
        cell.alignment = Alignment(horizontal="center", vertical="center")
        cell.border = _HEADER_BORDER
    ws.freeze_panes = "A2"
    return ws


def _finish_sheet(ws: Worksheet, first_money_row: int) -> None:
    """Money format for column B from first_money_row down, then fit column widths"""
    for r in range(first_money_row, ws.max_row + 1):
        ws.cell(r, 2).number_format = MONEY_FORMAT
    for column in ws.iter_cols():
        longest = max((len(str(c.value)) for c in column if c.value is not None), default=0)
        ws.column_dimensions[column[0].column_letter].width = min(45, max(10, longest + 2))


def export_excel(output: BillOutput, filepath: str) -> None:
    """
    Export a split report to Excel file with two sheets:
    - Summary: date, location, subtotal, tip, total
    - Breakdown: one row per participant plus a TOTAL row
    """
    wb = Workbook()
    # remove default sheet
    wb.remove(wb.active)

    ws = _new_sheet(wb, "Summary", ["Field", "Value"])
    ws.append(["Date", output.date])
    ws.append(["Location", output.location])
    ws.append(["Subtotal", output.sub_total])
    ws.append(["Tip", output.tip])
    ws.append(["Total", output.total_amount])
    _finish_sheet(ws, first_money_row=4)

    ws = _new_sheet(wb, "Breakdown", ["Name", "Amount"])
    for p in output.items:
        ws.append([p.name, p.amount])
    last_data_row = ws.max_row
    ws.append(["TOTAL", f"=SUM(B2:B{last_data_row})" if last_data_row >= 2 else 0])
    ws.cell(ws.max_row, 1).font = Font(bold=True)
    _finish_sheet(ws, first_money_row=2)

    wb.save(filepath)
