"""Presenters for CLI output formatting.

Presenters turn export results and parsed export documents into rich tables
for the terminal.
"""

from .document import DocumentPresenter
from .summary import ExportSummaryPresenter, ExportSummaryRequest

__all__ = ["DocumentPresenter", "ExportSummaryPresenter", "ExportSummaryRequest"]
