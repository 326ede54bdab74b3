# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
DDL Parser sub-package.

This package turns CREATE TABLE text into schema records, split into focused
modules:

- core: statement discovery and table assembly
- clause_splitter: top-level comma splitting of a table body
- clause_classifier: column vs. constraint decision
- column_parser: column definition parsing
- constraint_parser: table-level constraint parsing
- type_normalizer: column type normalization
"""

from .clause_classifier import classify_clause
from .clause_splitter import split_clauses
from .column_parser import parse_column
from .constraint_parser import parse_constraint
from .core import extract_table_comment, parse_ddl, parse_ddl_file
from .type_normalizer import normalize_type, resolve_type_category

__all__ = [
    "parse_ddl",
    "parse_ddl_file",
    "extract_table_comment",
    "split_clauses",
    "classify_clause",
    "parse_column",
    "parse_constraint",
    "normalize_type",
    "resolve_type_category",
]
