# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

from enum import Enum

# Enumeration micro-format inside column comments: 【枚举】：0-待处理，1-处理中
ENUM_MARKER = "【枚举】"
ENUM_COLONS = (":", "：")
ENUM_DELIMITERS = (",", "，")
ENUM_SEPARATORS = ("-", "—", ":", "：")

# A "--" comment line containing one of these survives comment stripping
TABLE_COMMENT_HINTS = ("表", "table")

CURRENT_TIMESTAMP = "CURRENT_TIMESTAMP"

# Identifier, optionally wrapped in backticks, double quotes or brackets
IDENTIFIER_PATTERN = r'(?:`[^`]+`|"[^"]+"|\[[^\]]+\]|[\w$]+)'
QUALIFIED_IDENTIFIER_PATTERN = rf"{IDENTIFIER_PATTERN}(?:\s*\.\s*{IDENTIFIER_PATTERN})*"


class ClauseKind(str, Enum):
    """Classification of one comma-separated segment of a table body."""

    COLUMN = "column"
    CONSTRAINT = "constraint"
    UNRECOGNIZED = "unrecognized"


class ConstraintKind(str, Enum):
    """Kind of a table-level constraint clause."""

    PRIMARY_KEY = "primary_key"
    FOREIGN_KEY = "foreign_key"
    UNIQUE = "unique"
    INDEX = "index"
    CHECK = "check"
    OTHER = "other"


class TypeCategory(str, Enum):
    """Dialect-independent family of a column type."""

    INTEGER = "integer"
    DECIMAL = "decimal"
    FLOAT = "float"
    STRING = "string"
    DATETIME = "datetime"
    BOOLEAN = "boolean"
    BINARY = "binary"
    JSON = "json"
    OTHER = "other"
