# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

import pytest

from ddlschema.utils.constants import ClauseKind
from ddlschema.utils.sql_utils.ddl_parser.clause_classifier import classify_clause


class TestClassifyClause:
    """Column vs. constraint decisions."""

    @pytest.mark.parametrize(
        "clause",
        [
            "PRIMARY KEY (id)",
            "primary key (`id`)",
            "FOREIGN KEY (user_id) REFERENCES users(id)",
            "UNIQUE KEY uk_email (email)",
            "UNIQUE INDEX uk_email (email)",
            "UNIQUE (email)",
            "KEY idx_name (name)",
            "INDEX idx_name (name)",
            "FULLTEXT KEY ft_body (body)",
            "CONSTRAINT fk_user FOREIGN KEY (user_id) REFERENCES users (id)",
            "CHECK (age > 0)",
        ],
    )
    def test_constraints(self, clause):
        assert classify_clause(clause) is ClauseKind.CONSTRAINT

    @pytest.mark.parametrize(
        "clause",
        [
            "id INT",
            "`order` INT NOT NULL",
            '"user name" VARCHAR(20)',
            "[total] DECIMAL(10,2)",
            "key_name VARCHAR(64)",
            "index_no INT",
            "constraint_type VARCHAR(20)",
            "checked TINYINT(1)",
            "用户名 VARCHAR(32)",
        ],
    )
    def test_columns(self, clause):
        """Keyword-like prefixes must end at a word boundary to count as constraints."""
        assert classify_clause(clause) is ClauseKind.COLUMN

    def test_constraint_prefixed_column_name(self):
        """Only the whole word CONSTRAINT opens a named constraint."""
        assert classify_clause("constraint_name VARCHAR(64)") is ClauseKind.COLUMN
        assert classify_clause("CONSTRAINT pk_t PRIMARY KEY (id)") is ClauseKind.CONSTRAINT

    @pytest.mark.parametrize("clause", ["justonetoken", "(a, b)", "'quoted'"])
    def test_unrecognized(self, clause):
        assert classify_clause(clause) is ClauseKind.UNRECOGNIZED
