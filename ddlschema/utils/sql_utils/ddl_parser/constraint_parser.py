# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
Table-level constraint parsing.

Constraint clauses never become columns. They are kept as TableConstraint
records so primary keys declared at table level and foreign keys stay
available to callers.
"""

import re
from typing import Optional, Tuple

from ddlschema.schemas.table_models import TableConstraint
from ddlschema.utils.constants import IDENTIFIER_PATTERN, QUALIFIED_IDENTIFIER_PATTERN, ConstraintKind
from ddlschema.utils.loggings import get_logger
from ddlschema.utils.sql_utils.ddl_cleaner import (
    find_matching_paren,
    last_identifier_part,
    mask_quoted,
    unquote_identifier,
)
from ddlschema.utils.sql_utils.ddl_parser.clause_splitter import split_clauses

logger = get_logger(__name__)

# =============================================================================
# PRE-COMPILED REGEX PATTERNS FOR CONSTRAINT PARSING
# =============================================================================

_NAMED_CONSTRAINT_RE = re.compile(
    rf"^CONSTRAINT\s+(?!(?:PRIMARY|FOREIGN|UNIQUE|CHECK)\b)(?P<name>{IDENTIFIER_PATTERN})\s*",
    re.IGNORECASE,
)
_BARE_CONSTRAINT_RE = re.compile(r"^CONSTRAINT\s*", re.IGNORECASE)

_PRIMARY_KEY_RE = re.compile(r"^PRIMARY\s+KEY\b", re.IGNORECASE)
_FOREIGN_KEY_RE = re.compile(r"^FOREIGN\s+KEY\b", re.IGNORECASE)
_UNIQUE_RE = re.compile(r"^UNIQUE(?:\s+(?:KEY|INDEX))?\b", re.IGNORECASE)
_INDEX_RE = re.compile(r"^(?:(?:FULLTEXT|SPATIAL)(?:\s+(?:KEY|INDEX))?|KEY|INDEX)\b", re.IGNORECASE)
_CHECK_RE = re.compile(r"^CHECK\b", re.IGNORECASE)

_REFERENCES_RE = re.compile(
    rf"\bREFERENCES\s+(?P<table>{QUALIFIED_IDENTIFIER_PATTERN})\s*", re.IGNORECASE
)

_INDEX_NAME_RE = re.compile(rf"^\s*(?P<name>{IDENTIFIER_PATTERN})")

_KEY_PART_SUFFIX_RE = re.compile(r"\s+(?:ASC|DESC)$", re.IGNORECASE)
_KEY_PART_LENGTH_RE = re.compile(r"\s*\(\s*\d+\s*\)$")


def parse_constraint(clause: str) -> TableConstraint:
    """
    Parse a clause already classified as a table constraint.

    Recognises ``[CONSTRAINT name]`` followed by PRIMARY KEY, FOREIGN KEY ...
    REFERENCES, UNIQUE [KEY|INDEX], [FULLTEXT|SPATIAL] KEY/INDEX and CHECK.
    Anything else is returned with kind OTHER and its raw text.
    """
    definition = clause.strip()
    rest = definition
    name: Optional[str] = None

    named = _NAMED_CONSTRAINT_RE.match(rest)
    if named:
        name = unquote_identifier(named.group("name"))
        rest = rest[named.end():]
    else:
        bare = _BARE_CONSTRAINT_RE.match(rest)
        if bare:
            rest = rest[bare.end():]

    if _PRIMARY_KEY_RE.match(rest):
        columns, _ = _column_list(rest)
        return TableConstraint(
            kind=ConstraintKind.PRIMARY_KEY, name=name, columns=columns, definition=definition
        )

    match = _FOREIGN_KEY_RE.match(rest)
    if match:
        return _parse_foreign_key(rest, match.end(), name, definition)

    match = _UNIQUE_RE.match(rest)
    if match:
        return _parse_index(ConstraintKind.UNIQUE, rest, match.end(), name, definition)

    match = _INDEX_RE.match(rest)
    if match:
        return _parse_index(ConstraintKind.INDEX, rest, match.end(), name, definition)

    if _CHECK_RE.match(rest):
        return TableConstraint(kind=ConstraintKind.CHECK, name=name, definition=definition)

    logger.debug(f"Unsupported constraint kept as OTHER: {definition[:80]!r}")
    return TableConstraint(kind=ConstraintKind.OTHER, name=name, definition=definition)


def _parse_foreign_key(
    rest: str, keyword_end: int, name: Optional[str], definition: str
) -> TableConstraint:
    columns, close_idx = _column_list(rest)
    if name is None:
        # MySQL allows FOREIGN KEY <index_name> (...)
        name = _index_name(rest, keyword_end)

    referenced_table = None
    referenced_columns: Tuple[str, ...] = ()
    remainder = rest[close_idx + 1:] if close_idx >= 0 else ""
    reference = _REFERENCES_RE.search(mask_quoted(remainder))
    if reference:
        referenced_table = last_identifier_part(remainder[reference.start("table"):reference.end("table")])
        referenced_columns, _ = _column_list(remainder[reference.end():])
    else:
        logger.debug(f"FOREIGN KEY without REFERENCES: {definition[:80]!r}")

    return TableConstraint(
        kind=ConstraintKind.FOREIGN_KEY,
        name=name,
        columns=columns,
        referenced_table=referenced_table,
        referenced_columns=referenced_columns,
        definition=definition,
    )


def _parse_index(
    kind: ConstraintKind, rest: str, keyword_end: int, name: Optional[str], definition: str
) -> TableConstraint:
    columns, _ = _column_list(rest)
    if name is None:
        name = _index_name(rest, keyword_end)
    return TableConstraint(kind=kind, name=name, columns=columns, definition=definition)


def _index_name(rest: str, keyword_end: int) -> Optional[str]:
    """Identifier between the constraint keywords and the key-part list, if any."""
    open_idx = mask_quoted(rest).find("(", keyword_end)
    head = rest[keyword_end:open_idx] if open_idx >= 0 else rest[keyword_end:]
    match = _INDEX_NAME_RE.match(head)
    if not match or match.group("name").upper() == "USING":
        return None
    return unquote_identifier(match.group("name"))


def _column_list(text: str) -> Tuple[Tuple[str, ...], int]:
    """
    Read the first parenthesised key-part list in ``text``.

    Returns the column names and the index of the closing parenthesis
    (-1 when there is no complete list).
    """
    open_idx = mask_quoted(text).find("(")
    if open_idx < 0:
        return (), -1
    close_idx = find_matching_paren(text, open_idx)
    if close_idx < 0:
        return (), -1

    columns = []
    for part in split_clauses(text[open_idx + 1:close_idx]):
        part = _KEY_PART_SUFFIX_RE.sub("", part)
        part = _KEY_PART_LENGTH_RE.sub("", part)
        part = unquote_identifier(part)
        if part:
            columns.append(part)
    return tuple(columns), close_idx
