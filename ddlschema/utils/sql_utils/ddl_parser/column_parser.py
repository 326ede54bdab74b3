# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
Column definition parsing.

A column clause is read as ``<name> <type-token> <tail>``. Flags, the default
value and the comment come from the tail; keyword searches run on a copy of
the tail with quoted text blanked out, so a comment such as
``'NOT NULL only for paid orders'`` does not change nullability.
"""

import re
from typing import Optional, Tuple

from ddlschema.configuration.parser_config import ParseOptions
from ddlschema.schemas.table_models import Column, DefaultValue
from ddlschema.utils.constants import CURRENT_TIMESTAMP, IDENTIFIER_PATTERN
from ddlschema.utils.loggings import get_logger
from ddlschema.utils.sql_utils.ddl_cleaner import (
    find_matching_paren,
    mask_quoted,
    read_quoted_literal,
    unquote_identifier,
)
from ddlschema.utils.sql_utils.ddl_parser.type_normalizer import normalize_type
from ddlschema.utils.sql_utils.enum_utils import decode_enum_comment

logger = get_logger(__name__)

# =============================================================================
# PRE-COMPILED REGEX PATTERNS FOR COLUMN PARSING
# =============================================================================

_COLUMN_HEAD_RE = re.compile(rf"^(?P<name>{IDENTIFIER_PATTERN})\s+(?P<rest>.*)$", re.DOTALL)

_TYPE_NAME_RE = re.compile(r"[^\s(]+")
_LENGTH_OPEN_RE = re.compile(r"\s*\(")

_PRIMARY_KEY_RE = re.compile(r"\bPRIMARY\s+KEY\b", re.IGNORECASE)
_AUTO_INCREMENT_RE = re.compile(r"\bAUTO_?INCREMENT\b", re.IGNORECASE)
_NOT_NULL_RE = re.compile(r"\bNOT\s+NULL\b", re.IGNORECASE)

_DEFAULT_RE = re.compile(r"\bDEFAULT\b\s*", re.IGNORECASE)
_COMMENT_RE = re.compile(r"\bCOMMENT\b\s*(?:=\s*)?", re.IGNORECASE)
_UNQUOTED_TOKEN_RE = re.compile(r"[^\s,]+")

_NUMERIC_RE = re.compile(r"^[+-]?\d+(?:\.\d+)?$")
_CURRENT_TIMESTAMP_RE = re.compile(r"^CURRENT_TIMESTAMP(?:\(\s*\d*\s*\))?$", re.IGNORECASE)


def split_column_clause(clause: str) -> Optional[Tuple[str, str, str]]:
    """
    Split a column clause into (name, type token, tail).

    The name is returned without backtick/quote/bracket delimiters. Returns
    None when the clause has no type token.
    """
    head = _COLUMN_HEAD_RE.match(clause.strip())
    if not head:
        return None

    rest = head.group("rest").lstrip()
    type_match = _TYPE_NAME_RE.match(rest)
    if not type_match:
        return None

    name = unquote_identifier(head.group("name"))
    if not name:
        return None

    type_end = type_match.end()
    # ENUM('a)', 'b') and similar: the length ends at the quote-aware matching paren
    open_match = _LENGTH_OPEN_RE.match(rest, type_end)
    if open_match:
        close_idx = find_matching_paren(rest, open_match.end() - 1)
        if close_idx >= 0:
            type_end = close_idx + 1
    return name, rest[:type_end], rest[type_end:]


def parse_column(clause: str, options: Optional[ParseOptions] = None) -> Optional[Column]:
    """
    Parse one column clause into a Column.

    Args:
        clause: Trimmed column clause, e.g. ``price DECIMAL(10,2) DEFAULT '0'``
        options: Parser switches; defaults keep comments and decode enums

    Returns:
        Column, or None when the clause is not ``<name> <type> ...``
    """
    options = options or ParseOptions()
    parts = split_column_clause(clause)
    if parts is None:
        logger.debug(f"Column clause without name/type: {clause[:80]!r}")
        return None

    name, type_token, tail = parts
    masked_tail = mask_quoted(tail)

    comment = extract_column_comment(tail, masked_tail)
    enum_values = decode_enum_comment(comment) if options.parse_enums else None

    return Column(
        name=name,
        type=normalize_type(type_token),
        nullable=_NOT_NULL_RE.search(masked_tail) is None,
        default_value=extract_default_value(tail, masked_tail),
        auto_increment=_AUTO_INCREMENT_RE.search(masked_tail) is not None,
        primary_key=_PRIMARY_KEY_RE.search(masked_tail) is not None,
        comment=comment if options.include_comments else "",
        enum_values=enum_values,
    )


def extract_default_value(tail: str, masked_tail: Optional[str] = None) -> DefaultValue:
    """
    Read the value of a ``DEFAULT <token>`` clause.

    Quotes are stripped, ``CURRENT_TIMESTAMP`` is kept as that string, decimal
    numerals become int/float and an unquoted ``NULL`` becomes None.
    """
    if masked_tail is None:
        masked_tail = mask_quoted(tail)

    match = _DEFAULT_RE.search(masked_tail)
    if not match:
        return None

    pos = match.end()
    literal = read_quoted_literal(tail, pos)
    if literal is not None:
        return _convert_default(literal[0])

    token_match = _UNQUOTED_TOKEN_RE.match(tail, pos)
    if not token_match:
        return None

    token = token_match.group(0)
    if token.upper() == "NULL":
        return None
    return _convert_default(token)


def _convert_default(value: str) -> DefaultValue:
    if _CURRENT_TIMESTAMP_RE.match(value):
        return CURRENT_TIMESTAMP
    if _NUMERIC_RE.match(value):
        return float(value) if "." in value else int(value)
    return value


def extract_column_comment(tail: str, masked_tail: Optional[str] = None) -> str:
    """Return the unescaped text of ``COMMENT '...'`` or an empty string."""
    if masked_tail is None:
        masked_tail = mask_quoted(tail)

    match = _COMMENT_RE.search(masked_tail)
    if not match:
        return ""

    literal = read_quoted_literal(tail, match.end())
    if literal is None:
        logger.debug(f"COMMENT without a terminated string literal: {tail[:80]!r}")
        return ""
    return literal[0]
