# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
Unit tests for DDL input validation.
"""

from ddlschema.utils.sql_utils.validation import (
    MAX_PAREN_DEPTH,
    UNBALANCED_PARENS_MSG,
    validate_sql_input,
)


class TestValidateSqlInput:
    """Test validation of raw DDL input."""

    def test_valid_ddl(self):
        assert validate_sql_input("CREATE TABLE t (id INT);") == (True, "")

    def test_non_string(self):
        is_valid, error = validate_sql_input(b"CREATE TABLE t (id INT);")

        assert is_valid is False
        assert "bytes" in error

    def test_too_long(self):
        is_valid, error = validate_sql_input("x" * 11, max_length=10)

        assert is_valid is False
        assert "exceeds" in error

    def test_null_byte(self):
        is_valid, _ = validate_sql_input("CREATE TABLE t (id INT)\x00")
        assert is_valid is False

    def test_unbalanced_parentheses(self):
        assert validate_sql_input("CREATE TABLE t (id INT;") == (False, UNBALANCED_PARENS_MSG)
        assert validate_sql_input("CREATE TABLE t id INT);") == (False, UNBALANCED_PARENS_MSG)

    def test_parentheses_in_quotes_and_comments_ignored(self):
        sql = "CREATE TABLE t (a TEXT COMMENT ':-(' , b INT) -- (\n/* ) */;"
        assert validate_sql_input(sql) == (True, "")

    def test_escaped_quote_in_literal(self):
        sql = "CREATE TABLE t (a TEXT DEFAULT 'it\\'s (');"
        assert validate_sql_input(sql) == (True, "")

    def test_excessive_nesting(self):
        sql = "(" * (MAX_PAREN_DEPTH + 1) + ")" * (MAX_PAREN_DEPTH + 1)
        is_valid, error = validate_sql_input(sql)

        assert is_valid is False
        assert "Excessive" in error
