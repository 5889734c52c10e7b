"""Page objects for the forensics table of an analysis result page."""

from analysis_pages.analysis_result import AnalysisResult
from analysis_pages.forensics_table import ForensicsTable, parse_total
from analysis_pages.page_object import PageObject
from analysis_pages.table_rows import DryTableRow, ForensicsTableRow, GenericTableRow, RowKind

__all__ = [
    "AnalysisResult",
    "DryTableRow",
    "ForensicsTable",
    "ForensicsTableRow",
    "GenericTableRow",
    "PageObject",
    "RowKind",
    "parse_total",
]
