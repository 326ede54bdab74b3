# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
Table extraction: the entry point of the DDL parser.

``parse_ddl`` finds every ``CREATE TABLE`` statement in a DDL text, hands each
body to the clause splitter and assembles the parsed columns and constraints
into Table records.

Statement boundaries are located on a masked copy of the cleaned text (quoted
contents and kept comment lines blanked), then the same positions are read
back from the cleaned text.
"""

import re
from bisect import bisect_left
from collections import Counter
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Union

from ddlschema.configuration.parser_config import ParseOptions
from ddlschema.schemas.table_models import Column, ParseResult, Table, TableConstraint
from ddlschema.utils.constants import QUALIFIED_IDENTIFIER_PATTERN, ClauseKind
from ddlschema.utils.exceptions import DdlParseException, ErrorCode, StructuralParseError
from ddlschema.utils.loggings import get_logger
from ddlschema.utils.sql_utils.ddl_cleaner import (
    find_matching_paren,
    find_statement_ends,
    last_identifier_part,
    mask_quoted,
    read_quoted_literal,
    strip_sql_comments,
)
from ddlschema.utils.sql_utils.ddl_parser.clause_classifier import classify_clause
from ddlschema.utils.sql_utils.ddl_parser.clause_splitter import split_clauses
from ddlschema.utils.sql_utils.ddl_parser.column_parser import parse_column
from ddlschema.utils.sql_utils.ddl_parser.constraint_parser import parse_constraint
from ddlschema.utils.sql_utils.validation import validate_sql_input

logger = get_logger(__name__)

# =============================================================================
# PRE-COMPILED REGEX PATTERNS FOR DDL PARSING
# =============================================================================

_CREATE_TABLE_RE = re.compile(
    rf"\bCREATE\s+TABLE\s+(?:IF\s+NOT\s+EXISTS\s+)?(?P<name>{QUALIFIED_IDENTIFIER_PATTERN})\s*\(",
    re.IGNORECASE,
)

_TABLE_COMMENT_RE = re.compile(r"\bCOMMENT\b\s*(?:=\s*)?", re.IGNORECASE)


# =============================================================================
# CORE PARSING FUNCTIONS
# =============================================================================

def parse_ddl(sql: str, options: Optional[ParseOptions] = None) -> ParseResult:
    """
    Parse every CREATE TABLE statement in a DDL text.

    Args:
        sql: DDL text with one or more ``CREATE TABLE ... ;`` statements,
            possibly mixed with comments and other SQL
        options: Parser switches (comments, enum decoding)

    Returns:
        ParseResult with one Table per statement, in input order

    Raises:
        DdlParseException: COMMON_VALIDATION_FAILED when ``sql`` is not a string
        StructuralParseError: when no CREATE TABLE statement is found
    """
    options = options or ParseOptions()

    if not isinstance(sql, str):
        raise DdlParseException(
            ErrorCode.COMMON_VALIDATION_FAILED, f"Invalid SQL input: SQL must be a string, got {type(sql).__name__}"
        )

    # Oversized, NUL-bearing or unbalanced text is still parsed as far as possible
    is_valid, error_msg = validate_sql_input(sql)
    if not is_valid:
        logger.warning(f"{error_msg}, parsing continues best-effort")

    cleaned = strip_sql_comments(sql)
    tables = list(_iter_tables(cleaned, options))
    if not tables:
        raise StructuralParseError()

    _warn_duplicate_names(tables)
    logger.info(
        f"Parsed {len(tables)} table(s) with {sum(len(table.columns) for table in tables)} column(s)"
    )
    return ParseResult(tables=tuple(tables))


def parse_ddl_file(
    path: Union[str, Path],
    options: Optional[ParseOptions] = None,
    encoding: str = "utf-8",
) -> ParseResult:
    """
    Read a DDL file and parse it with ``parse_ddl``.

    Raises:
        DdlParseException: DDL_FILE_NOT_FOUND when the file does not exist,
            COMMON_VALIDATION_FAILED when it cannot be decoded
    """
    file_path = Path(path).expanduser()
    if not file_path.is_file():
        raise DdlParseException(ErrorCode.DDL_FILE_NOT_FOUND, f"DDL file not found: {file_path}")

    try:
        sql = file_path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise DdlParseException(
            ErrorCode.COMMON_VALIDATION_FAILED, f"Cannot decode {file_path} as {encoding}: {e}"
        ) from e

    logger.debug(f"Read {len(sql)} characters from {file_path}")
    return parse_ddl(sql, options)


def _iter_tables(cleaned: str, options: ParseOptions) -> Iterator[Table]:
    masked = mask_quoted(cleaned)
    statement_ends = find_statement_ends(masked)
    pos = 0
    while True:
        match = _CREATE_TABLE_RE.search(masked, pos)
        if not match:
            return

        raw_name = cleaned[match.start("name"):match.end("name")]
        open_idx = match.end() - 1
        close_idx = find_matching_paren(masked, open_idx)
        if close_idx < 0:
            logger.warning(f"CREATE TABLE {raw_name} has no closing parenthesis, statement skipped")
            pos = match.end()
            continue

        options_end = _table_options_end(masked, close_idx + 1, statement_ends)
        yield _build_table(
            name=last_identifier_part(raw_name),
            body=cleaned[open_idx + 1:close_idx],
            table_options=cleaned[close_idx + 1:options_end],
            options=options,
        )
        pos = options_end


def _table_options_end(masked: str, start: int, statement_ends: Sequence[int]) -> int:
    """End of the table options: the terminating ``;``, the next statement or end of text."""
    candidates = [len(masked)]
    idx = bisect_left(statement_ends, start)
    if idx < len(statement_ends):
        candidates.append(statement_ends[idx])
    next_create = _CREATE_TABLE_RE.search(masked, start)
    if next_create:
        candidates.append(next_create.start())
    return min(candidates)


def _build_table(name: str, body: str, table_options: str, options: ParseOptions) -> Table:
    columns: List[Column] = []
    constraints: List[TableConstraint] = []

    for clause in split_clauses(body):
        kind = classify_clause(clause)
        if kind is ClauseKind.COLUMN:
            column = parse_column(clause, options)
            if column is not None:
                columns.append(column)
        elif kind is ClauseKind.CONSTRAINT:
            constraints.append(parse_constraint(clause))

    if not columns:
        logger.warning(f"Table {name} has no parsable column definitions")
    else:
        logger.debug(f"Table {name}: {len(columns)} column(s), {len(constraints)} constraint(s)")

    return Table(
        name=name,
        comment=extract_table_comment(table_options),
        columns=tuple(columns),
        constraints=tuple(constraints),
    )


def extract_table_comment(table_options: str) -> str:
    """Return the ``COMMENT [=] '...'`` text of the table options, or an empty string."""
    match = _TABLE_COMMENT_RE.search(mask_quoted(table_options))
    if not match:
        return ""
    literal = read_quoted_literal(table_options, match.end())
    return literal[0] if literal is not None else ""


def _warn_duplicate_names(tables: List[Table]) -> None:
    counts = Counter(table.name.lower() for table in tables)
    for table_name, count in counts.items():
        if count > 1:
            logger.warning(f"Table {table_name} is defined {count} times; all definitions are kept")
