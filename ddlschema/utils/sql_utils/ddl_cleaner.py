# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
DDL cleaning and quote-aware scanning utilities.

This module provides the low-level scanners shared by the DDL parser:
comment stripping, matching-parenthesis lookup, quote masking and quoted
literal reading. All of them track quote state so that parentheses, commas
and comment markers inside string literals are ignored.
"""

import re
from typing import List, Optional, Tuple

from ddlschema.utils.constants import TABLE_COMMENT_HINTS
from ddlschema.utils.loggings import get_logger

logger = get_logger(__name__)

_ESCAPE_MAP = {"n": "\n", "t": "\t", "r": "\r"}

_IDENTIFIER_DELIMITERS = (("`", "`"), ('"', '"'), ("[", "]"))


# =============================================================================
# SHARED QUOTE PARSING UTILITIES
# =============================================================================

class QuoteState:
    """Track quote state during SQL scanning."""
    __slots__ = ("in_single", "in_double", "in_backtick", "escaped")

    def __init__(self):
        self.in_single: bool = False
        self.in_double: bool = False
        self.in_backtick: bool = False
        self.escaped: bool = False

    @property
    def quoted(self) -> bool:
        return self.in_single or self.in_double or self.in_backtick

    def feed(self, char: str) -> bool:
        """
        Advance the state by one character.

        Returns True when the character belongs to a quoted section, including
        the opening and closing quote characters themselves.
        """
        if self.escaped:
            self.escaped = False
            return True

        if self.in_single or self.in_double:
            if char == "\\":
                self.escaped = True
            elif self.in_single and char == "'":
                self.in_single = False
            elif self.in_double and char == '"':
                self.in_double = False
            return True

        if self.in_backtick:
            if char == "`":
                self.in_backtick = False
            return True

        if char == "'":
            self.in_single = True
            return True
        if char == '"':
            self.in_double = True
            return True
        if char == "`":
            self.in_backtick = True
            return True
        return False


def _is_table_comment(comment_text: str) -> bool:
    lowered = comment_text.lower()
    return any(hint in lowered for hint in TABLE_COMMENT_HINTS)


def strip_sql_comments(sql: str) -> str:
    """
    Remove ``/* ... */`` and ``--`` comments outside quoted text.

    A ``--`` comment outside any parentheses whose text mentions a table
    (``表`` / ``table``) is kept verbatim, preserving author-written table
    descriptions placed between statements. Comments inside a statement body
    are always removed so they cannot merge into a column clause.
    """
    result = []
    state = QuoteState()
    depth = 0
    i = 0
    length = len(sql)

    while i < length:
        char = sql[i]

        if state.quoted or state.escaped:
            state.feed(char)
            result.append(char)
            i += 1
            continue

        if char == "/" and sql.startswith("/*", i):
            end = sql.find("*/", i + 2)
            if end < 0:
                logger.debug(f"Unterminated block comment at offset {i}, rest of input dropped")
                end = length - 2
            i = end + 2
            # keep tokens on both sides apart
            result.append(" ")
            continue

        if char == "-" and sql.startswith("--", i):
            end = sql.find("\n", i)
            if end < 0:
                end = length
            comment = sql[i:end]
            if depth == 0 and _is_table_comment(comment):
                result.append(comment)
            i = end
            continue

        if state.feed(char):
            result.append(char)
            i += 1
            continue

        if char == "(":
            depth += 1
        elif char == ")" and depth > 0:
            depth -= 1
        result.append(char)
        i += 1

    return "".join(result)


def find_matching_paren(text: str, open_idx: int) -> int:
    """
    Return the index of the parenthesis closing the one at ``open_idx``.

    Quotes are honoured. Returns -1 when the parenthesis is never closed.
    """
    if open_idx < 0 or open_idx >= len(text) or text[open_idx] != "(":
        return -1

    state = QuoteState()
    depth = 0
    for i in range(open_idx, len(text)):
        char = text[i]
        if state.feed(char):
            continue
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return i
    return -1


def find_statement_ends(text: str) -> List[int]:
    """Offsets of every ``;`` outside quotes, in ascending order."""
    state = QuoteState()
    ends = []
    for i, char in enumerate(text):
        if state.feed(char):
            continue
        if char == ";":
            ends.append(i)
    return ends


def mask_quoted(text: str, fill: str = " ") -> str:
    """
    Replace the contents of quoted sections and ``--`` comments with ``fill``.

    Quote characters and positions are preserved, so indexes found in the
    masked text are valid in the original text. Table description lines kept
    by ``strip_sql_comments`` are blanked here, so an apostrophe in them cannot
    open a quote.
    """
    state = QuoteState()
    masked = []
    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        if not state.quoted and char == "-" and text.startswith("--", i):
            end = text.find("\n", i)
            if end < 0:
                end = length
            masked.append(fill * (end - i))
            i = end
            continue
        was_quoted = state.quoted
        state.feed(char)
        masked.append(fill if was_quoted and state.quoted else char)
        i += 1
    return "".join(masked)


def read_quoted_literal(text: str, start: int) -> Optional[Tuple[str, int]]:
    """
    Read a quoted string literal starting at ``text[start]``.

    Supports doubled delimiters (``'it''s'``) and backslash escapes.

    Returns:
        Tuple of (unescaped content, index just past the closing quote), or
        None when ``text[start]`` is not a quote or the literal is unterminated.
    """
    if start >= len(text) or text[start] not in ("'", '"'):
        return None

    quote = text[start]
    content = []
    i = start + 1
    while i < len(text):
        char = text[i]
        if char == "\\" and i + 1 < len(text):
            nxt = text[i + 1]
            content.append(_ESCAPE_MAP.get(nxt, nxt))
            i += 2
            continue
        if char == quote:
            if i + 1 < len(text) and text[i + 1] == quote:
                content.append(quote)
                i += 2
                continue
            return "".join(content), i + 1
        content.append(char)
        i += 1
    return None


def unquote_identifier(identifier: str) -> str:
    """Strip backtick, double-quote or bracket delimiters from an identifier."""
    identifier = identifier.strip()
    for opener, closer in _IDENTIFIER_DELIMITERS:
        if len(identifier) >= 2 and identifier.startswith(opener) and identifier.endswith(closer):
            return identifier[1:-1]
    return identifier


def last_identifier_part(qualified: str) -> str:
    """Return the last segment of ``schema.table`` style names, unquoted."""
    parts = re.findall(r'`[^`]+`|"[^"]+"|\[[^\]]+\]|[^.]+', qualified.strip())
    if not parts:
        return unquote_identifier(qualified)
    return unquote_identifier(parts[-1])
