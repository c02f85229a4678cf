"""Tests for Excel and CSV export."""
import openpyxl
import pandas as pd
import pytest

from notification_parser.batch_runner import NotificationRecord, run_batch
from notification_parser.exporters import TRANSACTION_COLUMNS, ExcelExporter, export_csv


@pytest.fixture
def batch_summary(frozen_parser):
    records = [
        NotificationRecord(text="You spent Rp 50.000 at Coffee Shop on Jan 21", source="BCA"),
        NotificationRecord(text="You received Rp 1.500.000 from John Doe", source="Mandiri"),
        NotificationRecord(text="Thanh toan tai Highlands Coffee", source="VCB"),
        NotificationRecord(text="Hello world", source="VCB"),
    ]
    return run_batch(records, frozen_parser)


class TestExcelExporter:
    """Tests for ExcelExporter."""

    def test_sheets(self, tmp_path, batch_summary):
        output = ExcelExporter().export(batch_summary, tmp_path / "out" / "parsed.xlsx")
        wb = openpyxl.load_workbook(output)
        assert wb.sheetnames == ["Transactions", "Summary"]

    def test_transaction_rows(self, tmp_path, batch_summary):
        output = ExcelExporter().export(batch_summary, tmp_path / "parsed.xlsx")
        ws = openpyxl.load_workbook(output)["Transactions"]

        assert [cell.value for cell in ws[1]] == TRANSACTION_COLUMNS
        assert ws.max_row == 4
        assert ws.cell(row=2, column=2).value == "BCA"
        assert ws.cell(row=2, column=4).value == 50000

    def test_row_highlighting(self, tmp_path, batch_summary):
        output = ExcelExporter().export(batch_summary, tmp_path / "parsed.xlsx")
        ws = openpyxl.load_workbook(output)["Transactions"]

        assert ws.cell(row=3, column=1).fill.start_color.rgb.endswith(ExcelExporter.INCOME_COLOR)
        assert ws.cell(row=4, column=1).fill.start_color.rgb.endswith(ExcelExporter.PARTIAL_COLOR)

    def test_summary_totals(self, tmp_path, batch_summary):
        output = ExcelExporter().export(batch_summary, tmp_path / "parsed.xlsx")
        ws = openpyxl.load_workbook(output)["Summary"]

        assert ws.cell(row=1, column=1).value == "Processed"
        assert ws.cell(row=1, column=2).value == 4
        assert ws.cell(row=2, column=2).value == 3


def test_export_csv(tmp_path, batch_summary):
    output = export_csv(batch_summary, tmp_path / "parsed.csv")
    df = pd.read_csv(output)

    assert list(df.columns) == TRANSACTION_COLUMNS
    assert len(df) == 3
    assert df.iloc[1]["Direction"] == "Income"
