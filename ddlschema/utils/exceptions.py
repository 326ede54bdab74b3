# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
Exception types for DDL schema extraction.

Only structural failures (no CREATE TABLE statement at all, unreadable input,
invalid configuration) are raised to the caller. Irregular clauses, odd type
tokens and malformed enum markers are absorbed by the parser and logged.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Error codes with a default description."""

    COMMON_VALIDATION_FAILED = ("100001", "Input validation failed")
    CONFIG_INVALID = ("100002", "Invalid parser configuration")
    DDL_NO_TABLE_FOUND = ("200001", "No valid CREATE TABLE statement found")
    DDL_FILE_NOT_FOUND = ("200002", "DDL file not found")

    def __init__(self, code: str, desc: str):
        self.code = code
        self.desc = desc


class DdlParseException(Exception):
    """Base exception carrying an ErrorCode and a formatted message."""

    def __init__(
        self,
        code: ErrorCode,
        message: Optional[str] = None,
        message_args: Optional[Dict[str, Any]] = None,
    ):
        self.code = code
        if message is None:
            message = code.desc
        if message_args:
            message = message.format(**message_args)
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return f"error_code={self.code.code}, error_message={self.message}"


class StructuralParseError(DdlParseException):
    """Raised when the input contains no recognisable CREATE TABLE statement."""

    def __init__(self, message: Optional[str] = None, message_args: Optional[Dict[str, Any]] = None):
        super().__init__(ErrorCode.DDL_NO_TABLE_FOUND, message, message_args)
