# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
Top-level comma splitting of a CREATE TABLE body.

The body is scanned once with a small state machine (normal, inside single
quotes, inside double quotes) plus a parenthesis depth counter, so commas in
``DECIMAL(10,2)`` or ``DEFAULT '0,00'`` never end a clause.
"""

from enum import Enum
from typing import List


class SplitState(Enum):
    NORMAL = "normal"
    IN_SINGLE_QUOTE = "in_single_quote"
    IN_DOUBLE_QUOTE = "in_double_quote"


_QUOTE_STATES = {
    "'": SplitState.IN_SINGLE_QUOTE,
    '"': SplitState.IN_DOUBLE_QUOTE,
}


def split_clauses(body: str) -> List[str]:
    """
    Split a statement body on top-level commas.

    A quote character only closes the quoting state it opened, so ``"`` inside
    ``'...'`` (and vice versa) is plain text. Parentheses inside quotes are
    ignored. A backslash inside quotes escapes the next character.

    Args:
        body: Text between the outer parentheses of a CREATE TABLE statement

    Returns:
        Trimmed, non-empty clause strings in source order
    """
    clauses: List[str] = []
    current: List[str] = []
    state = SplitState.NORMAL
    quote_char = ""
    paren_depth = 0
    escaped = False

    for char in body:
        if state is not SplitState.NORMAL:
            current.append(char)
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == quote_char:
                state = SplitState.NORMAL
                quote_char = ""
            continue

        if char in _QUOTE_STATES:
            state = _QUOTE_STATES[char]
            quote_char = char
        elif char == "(":
            paren_depth += 1
        elif char == ")":
            paren_depth -= 1
        elif char == "," and paren_depth == 0:
            _flush(current, clauses)
            current = []
            continue

        current.append(char)

    _flush(current, clauses)
    return clauses


def _flush(current: List[str], clauses: List[str]) -> None:
    clause = "".join(current).strip()
    if clause:
        clauses.append(clause)
