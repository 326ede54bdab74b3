# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
Column type normalization.

``normalize_type`` turns a raw type token such as ``varchar(255)`` or
``DECIMAL(10,2)`` into a TypeInfo. The length/precision suffix is kept as the
raw text between the parentheses; callers split it themselves (or use
``TypeInfo.precision`` / ``TypeInfo.scale``).

The type family is looked up through sqlglot's data type table so that
``INT``, ``INTEGER`` and ``MEDIUMINT`` all land in the same category.
"""

import re
from functools import lru_cache

import sqlglot
from sqlglot import exp

from ddlschema.schemas.table_models import TypeInfo
from ddlschema.utils.constants import TypeCategory
from ddlschema.utils.loggings import get_logger
from ddlschema.utils.sql_utils.ddl_cleaner import find_matching_paren

logger = get_logger(__name__)

_TYPE_NAME_RE = re.compile(r"^([A-Za-z][A-Za-z0-9_]*)\s*")

# Checked by name, the sqlglot Type member set differs between releases
_DECIMAL_NAMES = frozenset({"DECIMAL", "BIGDECIMAL", "UDECIMAL", "MONEY", "SMALLMONEY", "NUMERIC"})
_BINARY_NAMES = frozenset(
    {"BINARY", "VARBINARY", "BLOB", "TINYBLOB", "MEDIUMBLOB", "LONGBLOB", "BYTEA", "IMAGE"}
)
_STRING_NAMES = frozenset({"TINYTEXT", "MEDIUMTEXT", "LONGTEXT", "ENUM", "SET", "UUID"})
_JSON_NAMES = frozenset({"JSON", "JSONB"})
_BOOLEAN_NAMES = frozenset({"BOOLEAN", "BOOL"})


@lru_cache(maxsize=1024)
def normalize_type(token: str) -> TypeInfo:
    """
    Normalize a raw column type token.

    The name is the leading identifier run, so ``INT[]`` gives ``INT``. The
    length is the text inside the parenthesis that directly follows the name,
    matched with quotes honoured. Never raises: a token without a leading
    letter comes back with the uppercased whole token as ``name``.

    Args:
        token: Type token as written in the DDL, e.g. ``varchar(255)``

    Returns:
        TypeInfo with ``original_type`` equal to ``token``
    """
    stripped = token.strip()
    match = _TYPE_NAME_RE.match(stripped)
    if not match:
        logger.debug(f"Type token has no leading type name: {token!r}")
        return TypeInfo(name=stripped.upper(), length=None, original_type=token)

    name = match.group(1).upper()
    length = None
    if stripped.startswith("(", match.end()):
        close_idx = find_matching_paren(stripped, match.end())
        if close_idx >= 0:
            length = stripped[match.end() + 1:close_idx]
    return TypeInfo(
        name=name,
        length=length.strip() if length is not None else None,
        original_type=token,
        category=resolve_type_category(stripped),
    )


def resolve_type_category(token: str) -> TypeCategory:
    """Map a type token to its dialect-independent family."""
    try:
        data_type = exp.DataType.build(token, dialect="mysql")
    except (sqlglot.errors.ParseError, sqlglot.errors.TokenError, ValueError) as e:
        logger.debug(f"sqlglot cannot build data type from {token!r}: {e}")
        return TypeCategory.OTHER
    except Exception as e:
        logger.debug(f"Unexpected error resolving type category for {token!r}: {e}")
        return TypeCategory.OTHER

    type_name = data_type.this.name if isinstance(data_type.this, exp.DataType.Type) else ""
    if not type_name:
        return TypeCategory.OTHER

    if type_name in _BOOLEAN_NAMES:
        return TypeCategory.BOOLEAN
    if data_type.this in exp.DataType.INTEGER_TYPES:
        return TypeCategory.INTEGER
    if data_type.this in exp.DataType.FLOAT_TYPES:
        return TypeCategory.FLOAT
    if type_name in _DECIMAL_NAMES:
        return TypeCategory.DECIMAL
    if type_name in _JSON_NAMES:
        return TypeCategory.JSON
    if type_name in _BINARY_NAMES:
        return TypeCategory.BINARY
    if data_type.this in exp.DataType.TEXT_TYPES or type_name in _STRING_NAMES:
        return TypeCategory.STRING
    if data_type.this in exp.DataType.TEMPORAL_TYPES or type_name in ("DATE", "TIME", "YEAR"):
        return TypeCategory.DATETIME
    return TypeCategory.OTHER
