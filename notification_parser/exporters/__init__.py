"""Export modules."""
from .excel_exporter import TRANSACTION_COLUMNS, ExcelExporter, export_csv

__all__ = ['TRANSACTION_COLUMNS', 'ExcelExporter', 'export_csv']
