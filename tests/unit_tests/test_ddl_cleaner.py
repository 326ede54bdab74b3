# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
Unit tests for comment stripping and quote-aware scanners.
"""

from ddlschema.utils.sql_utils.ddl_cleaner import (
    QuoteState,
    find_matching_paren,
    find_statement_ends,
    last_identifier_part,
    mask_quoted,
    read_quoted_literal,
    strip_sql_comments,
    unquote_identifier,
)


class TestStripSqlComments:
    """Comment removal rules."""

    def test_block_comment_removed(self):
        assert strip_sql_comments("a /* hidden */b").split() == ["a", "b"]

    def test_block_comment_separates_tokens(self):
        assert "INT NOT" in strip_sql_comments("INT/**/NOT")

    def test_line_comment_removed(self):
        sql = "CREATE TABLE t (\n  id INT -- identifier\n);"
        assert "identifier" not in strip_sql_comments(sql)

    def test_table_description_line_kept(self):
        sql = "-- 用户表\nCREATE TABLE users (id INT);\n-- Orders table\nCREATE TABLE orders (id INT);"
        cleaned = strip_sql_comments(sql)

        assert "-- 用户表" in cleaned
        assert "-- Orders table" in cleaned

    def test_other_line_comment_outside_statement_removed(self):
        assert strip_sql_comments("-- generated by tool\nSELECT 1;").strip() == "SELECT 1;"

    def test_table_word_inside_body_still_removed(self):
        sql = "CREATE TABLE t (\n  id INT, -- table key\n  name TEXT\n);"
        assert "table key" not in strip_sql_comments(sql)

    def test_comment_markers_inside_quotes_kept(self):
        sql = "a TEXT DEFAULT '--x' COMMENT '/* y */'"
        assert strip_sql_comments(sql) == sql

    def test_unterminated_block_comment(self):
        assert strip_sql_comments("id INT /* never closed").strip() == "id INT"


class TestScanners:
    def test_quote_state_tracks_each_quote_type(self):
        state = QuoteState()
        flags = [state.feed(char) for char in "a'b'c"]

        assert flags == [False, True, True, True, False]
        assert state.quoted is False

    def test_find_matching_paren_nested(self):
        text = "t (a DECIMAL(10,2), b TEXT COMMENT ')') x"
        assert text[find_matching_paren(text, 2):] == ") x"

    def test_find_matching_paren_unclosed(self):
        assert find_matching_paren("(a (b)", 0) == -1
        assert find_matching_paren("abc", 0) == -1

    def test_find_statement_ends_skips_quoted_semicolon(self):
        text = "COMMENT 'a;b'; x `c;d`;"
        assert find_statement_ends(text) == [13, len(text) - 1]
        assert find_statement_ends("no end") == []

    def test_mask_quoted_keeps_positions(self):
        text = "x 'a,b' \"c\" `d` y"
        masked = mask_quoted(text)

        assert len(masked) == len(text)
        assert masked == "x '   ' \" \" ` ` y"

    def test_mask_quoted_blanks_line_comments(self):
        masked = mask_quoted("-- user's table\nCREATE")
        assert masked == " " * len("-- user's table") + "\nCREATE"

    def test_read_quoted_literal(self):
        assert read_quoted_literal("'it''s' rest", 0) == ("it's", 7)
        assert read_quoted_literal('"a\\nb"', 0) == ("a\nb", 6)
        assert read_quoted_literal("x'a'", 0) is None
        assert read_quoted_literal("'open", 0) is None

    def test_unquote_identifier(self):
        assert unquote_identifier("`users`") == "users"
        assert unquote_identifier('"users"') == "users"
        assert unquote_identifier("[users]") == "users"
        assert unquote_identifier("users") == "users"

    def test_last_identifier_part(self):
        assert last_identifier_part("`db`.`users`") == "users"
        assert last_identifier_part("db.users") == "users"
        assert last_identifier_part('"my.schema"."order items"') == "order items"
