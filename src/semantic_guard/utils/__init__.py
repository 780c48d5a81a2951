"""
Utilities module for the semantic guard.
"""
from .exceptions import *

__all__ = [
    "SemanticGuardException",
    "EmptyInputError",
    "DataParsingException",
    "ColumnNotFoundException",
    "UnsupportedFileTypeException",
    "BaselineException",
    "ReportExportException"
]
