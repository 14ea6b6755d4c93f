#!/usr/bin/env python3
# -*-coding: utf-8-*-
"""
zpatchgen - Consolidated Exception Classes

All project errors derive from BaseError so the command line can report
them uniformly and log them as structured data.
"""

from datetime import datetime
from typing import Dict, Any, Optional


class BaseError(Exception):
    """Base class for all project-specific errors."""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_code = error_code or "ERROR"
        self.details = details or {}
        self.timestamp = datetime.now()

    def to_dict(self) -> Dict[str, Any]:
        """Converts the exception to a dictionary for structured logging."""
        return {
            'error_code': self.error_code,
            'message': str(self),
            'details': self.details,
            'timestamp': self.timestamp.isoformat()
        }


# =====================================================================================================
# Shape errors
# =====================================================================================================

class ShapeError(BaseError, ValueError):
    """Raised when a value does not have the shape a field requires.

    Subclasses ValueError so pydantic validators report it as a field error.
    """

    def __init__(self, message: str, field_name: Optional[str] = None,
                 value: Optional[Any] = None,
                 details: Optional[Dict[str, Any]] = None):
        shape_details = details or {}
        if field_name:
            shape_details['field_name'] = field_name
        if value is not None:
            shape_details['value'] = value
        super().__init__(message, "SHAPE_ERROR", shape_details)


# =====================================================================================================
# Configuration -related errors
# =====================================================================================================

class ConfigurationError(BaseError):
    """Base class for configuration errors."""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 file_path: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        config_details = details or {}
        if file_path:
            config_details['file_path'] = str(file_path)
        super().__init__(message, error_code or "CONFIG_ERROR", config_details)


class PatchLoadError(ConfigurationError):
    """Raised when the patch list cannot be read, parsed or shaped."""

    def __init__(self, message: str, file_path: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "PATCH_LOAD_ERROR", file_path, details)


# =====================================================================================================
# Processing errors
# =====================================================================================================

class ProcessingError(BaseError):
    """Base class for errors while checking or rendering a patch batch."""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 title: Optional[str] = None,
                 phase: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        proc_details = details or {}
        if title is not None:
            proc_details['title'] = title
        if phase:
            proc_details['phase'] = phase
        super().__init__(message, error_code or "PROCESSING_ERROR", proc_details)


class LengthMismatchError(ProcessingError):
    """Raised when a replacement's before and after bytes differ in length."""

    def __init__(self, addr: int, title: str,
                 before_length: int, after_length: int,
                 details: Optional[Dict[str, Any]] = None):
        self.addr = addr
        self.title = title
        mismatch_details = details or {}
        mismatch_details['addr'] = addr
        mismatch_details['before_length'] = before_length
        mismatch_details['after_length'] = after_length
        super().__init__(
            f"replacement at addr {addr} for {title} has length mismatch",
            "LENGTH_MISMATCH", title, "validation", mismatch_details,
        )
