# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

import re

from ddlschema.utils.constants import IDENTIFIER_PATTERN, ClauseKind
from ddlschema.utils.loggings import get_logger

logger = get_logger(__name__)

# Table-level clause prefixes; keywords must end at a word boundary so columns
# such as ``constraint_type`` or ``key_name`` are not mistaken for constraints.
_CONSTRAINT_PREFIX_RE = re.compile(
    r"^(?:PRIMARY\s+KEY|FOREIGN\s+KEY|UNIQUE(?:\s+(?:KEY|INDEX))?|"
    r"(?:FULLTEXT|SPATIAL)(?:\s+(?:KEY|INDEX))?|KEY|INDEX|CONSTRAINT|CHECK)\b"
)

_COLUMN_SHAPE_RE = re.compile(rf"^{IDENTIFIER_PATTERN}\s+")


def classify_clause(clause: str) -> ClauseKind:
    """
    Decide whether a body clause is a column definition or a table constraint.

    Clauses matching neither shape are UNRECOGNIZED; the caller drops them.
    """
    clause = clause.strip()
    if _CONSTRAINT_PREFIX_RE.match(clause.upper()):
        return ClauseKind.CONSTRAINT

    if _COLUMN_SHAPE_RE.match(clause):
        return ClauseKind.COLUMN

    logger.debug(f"Unrecognized clause skipped: {clause[:80]!r}")
    return ClauseKind.UNRECOGNIZED
