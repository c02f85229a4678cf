"""
Export parsed notifications.

The Excel workbook has 2 sheets:
1. Transactions - One row per parsed candidate
2. Summary - Batch totals and expense breakdown by category
"""
import logging
from pathlib import Path

import openpyxl
import pandas as pd
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from ..analytics import TransactionAnalyzer
from ..models import BatchParseSummary, TransactionDirection

logger = logging.getLogger(__name__)

TRANSACTION_COLUMNS = ["Received", "Source", "Direction", "Amount", "Merchant", "Category", "Text"]


def _rows(summary: BatchParseSummary) -> list:
    rows = []
    for item in summary.results:
        txn = item.candidate
        if txn is None:
            continue
        rows.append([
            txn.occurred_at.strftime("%Y-%m-%d %H:%M:%S"),
            txn.source,
            txn.direction.value,
            float(txn.amount),
            txn.merchant or "",
            txn.category or "",
            item.text,
        ])
    return rows


class ExcelExporter:
    """Export batch parse results to a formatted Excel workbook."""

    # Colors
    HEADER_COLOR = "366092"  # Dark blue
    INCOME_COLOR = "C6EFCE"  # Light green
    PARTIAL_COLOR = "FFEB9C"  # Light yellow

    def __init__(self, number_format: str = '#,##0.##'):
        self.number_format = number_format

    def export(self, summary: BatchParseSummary, output_path: Path) -> Path:
        """
        Export batch results to Excel.

        Args:
            summary: Batch parse summary
            output_path: Path for output Excel file

        Returns:
            Path to created Excel file
        """
        logger.info(f"Exporting to Excel: {output_path}")

        wb = openpyxl.Workbook()
        if "Sheet" in wb.sheetnames:
            wb.remove(wb["Sheet"])

        self._create_transactions_sheet(wb, summary)
        self._create_summary_sheet(wb, summary)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        wb.save(output_path)
        logger.info(f"Excel export complete: {output_path}")
        return output_path

    def _write_header(self, ws, headers: list) -> None:
        for col, header in enumerate(headers, 1):
            cell = ws.cell(row=1, column=col, value=header)
            cell.font = Font(bold=True, color="FFFFFF")
            cell.fill = PatternFill(start_color=self.HEADER_COLOR, fill_type="solid")
            cell.alignment = Alignment(horizontal="center", vertical="center")

    def _create_transactions_sheet(self, wb: openpyxl.Workbook, summary: BatchParseSummary) -> None:
        """Create transactions sheet with one row per candidate."""
        ws = wb.create_sheet("Transactions", 0)
        self._write_header(ws, TRANSACTION_COLUMNS)

        amount_col = TRANSACTION_COLUMNS.index("Amount") + 1
        direction_col = TRANSACTION_COLUMNS.index("Direction") + 1

        for row_idx, row in enumerate(_rows(summary), 2):
            for col_idx, value in enumerate(row, 1):
                ws.cell(row=row_idx, column=col_idx, value=value)
            ws.cell(row=row_idx, column=amount_col).number_format = self.number_format

            fill_color = None
            if row[direction_col - 1] == TransactionDirection.INCOME.value:
                fill_color = self.INCOME_COLOR
            if row[amount_col - 1] == 0:
                fill_color = self.PARTIAL_COLOR
            if fill_color:
                for col in range(1, len(TRANSACTION_COLUMNS) + 1):
                    ws.cell(row=row_idx, column=col).fill = PatternFill(
                        start_color=fill_color,
                        fill_type="solid"
                    )

        for col in range(1, len(TRANSACTION_COLUMNS) + 1):
            ws.column_dimensions[get_column_letter(col)].width = 18
        ws.column_dimensions[get_column_letter(len(TRANSACTION_COLUMNS))].width = 60

        ws.freeze_panes = "A2"

    def _create_summary_sheet(self, wb: openpyxl.Workbook, summary: BatchParseSummary) -> None:
        """Create summary sheet with totals and category breakdown."""
        ws = wb.create_sheet("Summary", 1)

        row = 1
        for key, value in summary.totals.items():
            ws.cell(row=row, column=1, value=key.capitalize()).font = Font(bold=True)
            ws.cell(row=row, column=2, value=value)
            row += 1

        candidates = summary.candidates
        if not candidates:
            return

        analyzer = TransactionAnalyzer(candidates)
        row += 1
        for key, value in analyzer.get_summary().items():
            ws.cell(row=row, column=1, value=key.replace('_', ' ').capitalize()).font = Font(bold=True)
            cell = ws.cell(row=row, column=2, value=value)
            if isinstance(value, float):
                cell.number_format = self.number_format
            row += 1

        row += 1
        for col, header in enumerate(["Category", "Amount", "Share %", "Count"], 1):
            ws.cell(row=row, column=col, value=header).font = Font(bold=True)
        row += 1
        for entry in analyzer.get_breakdown_by_category():
            ws.cell(row=row, column=1, value=entry['label'])
            ws.cell(row=row, column=2, value=entry['amount']).number_format = self.number_format
            ws.cell(row=row, column=3, value=round(entry['percentage'], 1))
            ws.cell(row=row, column=4, value=entry['count'])
            row += 1

        ws.column_dimensions['A'].width = 25
        ws.column_dimensions['B'].width = 18


def export_csv(summary: BatchParseSummary, output_path: Path) -> Path:
    """Write parsed candidates to CSV."""
    df = pd.DataFrame(_rows(summary), columns=TRANSACTION_COLUMNS)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_path, index=False, encoding='utf-8')
    logger.info(f"CSV export complete: {output_path}")
    return output_path
