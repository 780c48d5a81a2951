"""
Custom exceptions for the semantic guard.
"""
from typing import Optional, Dict, Any


class SemanticGuardException(Exception):
    """Base exception for the semantic guard."""
    
    def __init__(
        self,
        message: str,
        error_code: str = "G000",
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize exception.
        
        Args:
            message: Error message
            error_code: Error code
            details: Additional error details
        """
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class EmptyInputError(SemanticGuardException):
    """Exception raised when summarizing an empty observation sequence."""
    
    def __init__(
        self,
        message: str = "Cannot calculate statistics on empty data",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            error_code="G001",
            details=details
        )


class DataParsingException(SemanticGuardException):
    """Exception raised when a data file cannot be parsed."""
    
    def __init__(
        self,
        message: str = "Failed to parse data file",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            error_code="G002",
            details=details
        )


class ColumnNotFoundException(SemanticGuardException):
    """Exception raised when the numeric column is missing from a data file."""
    
    def __init__(
        self,
        message: str = "Numeric column not found",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            error_code="G003",
            details=details
        )


class UnsupportedFileTypeException(SemanticGuardException):
    """Exception raised for file types the guard cannot read."""
    
    def __init__(
        self,
        message: str = "Unsupported file type",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            error_code="G004",
            details=details
        )


class BaselineException(SemanticGuardException):
    """Exception raised for baseline storage errors."""
    
    def __init__(
        self,
        message: str = "Baseline operation failed",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            error_code="G005",
            details=details
        )


class ReportExportException(SemanticGuardException):
    """Exception raised when the artifact report cannot be written."""
    
    def __init__(
        self,
        message: str = "Failed to export report",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            error_code="G006",
            details=details
        )
