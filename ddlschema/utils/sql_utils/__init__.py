# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
SQL Utilities Module

DDL scanning, validation and parsing utilities, split into submodules:

- validation: Input validation functions
- enum_utils: Enum value extraction from comments
- ddl_cleaner: Comment stripping and quote-aware scanning
- relations: Table relations from foreign keys and naming conventions
- ddl_parser: CREATE TABLE parsing
"""

from .ddl_cleaner import strip_sql_comments
from .ddl_parser import parse_ddl, parse_ddl_file
from .enum_utils import decode_enum_comment, encode_enum_comment, has_enum_marker
from .relations import extract_relations
from .validation import MAX_PAREN_DEPTH, MAX_SQL_LENGTH, validate_sql_input

__all__ = [
    # Validation
    "validate_sql_input",
    "MAX_SQL_LENGTH",
    "MAX_PAREN_DEPTH",
    # Enum utilities
    "decode_enum_comment",
    "encode_enum_comment",
    "has_enum_marker",
    # DDL cleaner
    "strip_sql_comments",
    # Parsing
    "parse_ddl",
    "parse_ddl_file",
    "extract_relations",
]
