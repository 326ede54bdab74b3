# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
Input validation for DDL text.

Validation reports input problems (wrong type, oversized, binary content,
unbalanced or deeply nested parentheses) as a message. Only the wrong-type case
stops the DDL parser; the others are logged and parsing continues.
"""

from typing import Any, Tuple

from ddlschema.utils.loggings import get_logger

logger = get_logger(__name__)

# 500KB is far above any hand-written schema file
MAX_SQL_LENGTH = 512000
MAX_PAREN_DEPTH = 100

UNBALANCED_PARENS_MSG = "Unbalanced parentheses in SQL"


def validate_sql_input(sql: Any, max_length: int = MAX_SQL_LENGTH) -> Tuple[bool, str]:
    """
    Validate DDL input before parsing.

    Parentheses are counted outside quotes and outside ``--`` / ``/* */``
    comments.

    Args:
        sql: Input to validate
        max_length: Maximum allowed length for the SQL string

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not isinstance(sql, str):
        return False, f"SQL must be a string, got {type(sql).__name__}"

    if len(sql) > max_length:
        return False, f"SQL length ({len(sql)}) exceeds maximum allowed ({max_length})"

    if "\x00" in sql:
        return False, "NULL bytes not allowed in SQL"

    paren_depth = 0
    in_single_quote = False
    in_double_quote = False
    in_backtick = False
    in_line_comment = False
    in_block_comment = False
    escaped = False
    prev_char = ""
    for char in sql:
        if in_line_comment:
            if char == "\n":
                in_line_comment = False
            prev_char = char
            continue
        if in_block_comment:
            if prev_char == "*" and char == "/":
                in_block_comment = False
                char = ""
            prev_char = char
            continue
        if escaped:
            escaped = False
            prev_char = ""
            continue
        if (in_single_quote or in_double_quote) and char == "\\":
            escaped = True
            prev_char = char
            continue
        if in_single_quote:
            if char == "'":
                in_single_quote = False
            prev_char = char
            continue
        if in_double_quote:
            if char == '"':
                in_double_quote = False
            prev_char = char
            continue
        if in_backtick:
            if char == "`":
                in_backtick = False
            prev_char = char
            continue
        if prev_char == "-" and char == "-":
            in_line_comment = True
            prev_char = char
            continue
        if prev_char == "/" and char == "*":
            in_block_comment = True
            prev_char = ""
            continue
        if char == "'":
            in_single_quote = True
        elif char == '"':
            in_double_quote = True
        elif char == "`":
            in_backtick = True
        elif char == "(":
            paren_depth += 1
            if paren_depth > MAX_PAREN_DEPTH:
                return False, f"Excessive nested parentheses (depth {paren_depth})"
        elif char == ")":
            paren_depth -= 1
            if paren_depth < 0:
                return False, UNBALANCED_PARENS_MSG
        prev_char = char

    if paren_depth != 0:
        logger.debug(f"Parentheses left open at end of input (depth {paren_depth})")
        return False, UNBALANCED_PARENS_MSG

    return True, ""
