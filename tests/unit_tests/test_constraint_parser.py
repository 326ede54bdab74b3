# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
Unit tests for table-level constraint parsing.
"""

from ddlschema.utils.constants import ConstraintKind
from ddlschema.utils.sql_utils.ddl_parser.constraint_parser import parse_constraint


class TestPrimaryKey:
    def test_single_column(self):
        constraint = parse_constraint("PRIMARY KEY (`id`)")

        assert constraint.kind is ConstraintKind.PRIMARY_KEY
        assert constraint.columns == ("id",)
        assert constraint.name is None
        assert constraint.definition == "PRIMARY KEY (`id`)"

    def test_composite_with_using(self):
        constraint = parse_constraint("PRIMARY KEY (tenant_id, id) USING BTREE")
        assert constraint.columns == ("tenant_id", "id")

    def test_named(self):
        constraint = parse_constraint("CONSTRAINT pk_orders PRIMARY KEY (id)")

        assert constraint.kind is ConstraintKind.PRIMARY_KEY
        assert constraint.name == "pk_orders"


class TestForeignKey:
    def test_unnamed(self):
        constraint = parse_constraint("FOREIGN KEY (user_id) REFERENCES users(id)")

        assert constraint.kind is ConstraintKind.FOREIGN_KEY
        assert constraint.columns == ("user_id",)
        assert constraint.referenced_table == "users"
        assert constraint.referenced_columns == ("id",)

    def test_named_with_actions_and_schema(self):
        constraint = parse_constraint(
            "CONSTRAINT `fk_order_user` FOREIGN KEY (`user_id`) REFERENCES `shop`.`users` (`id`) "
            "ON DELETE CASCADE ON UPDATE NO ACTION"
        )

        assert constraint.name == "fk_order_user"
        assert constraint.referenced_table == "users"
        assert constraint.referenced_columns == ("id",)

    def test_index_name_after_keywords(self):
        constraint = parse_constraint("FOREIGN KEY fk_user (user_id) REFERENCES users (id)")

        assert constraint.name == "fk_user"
        assert constraint.columns == ("user_id",)

    def test_missing_references(self):
        constraint = parse_constraint("FOREIGN KEY (user_id)")

        assert constraint.kind is ConstraintKind.FOREIGN_KEY
        assert constraint.referenced_table is None
        assert constraint.referenced_columns == ()

    def test_serialized_aliases(self):
        data = parse_constraint("FOREIGN KEY (a, b) REFERENCES t (x, y)").to_dict()

        assert data["kind"] == "foreign_key"
        assert data["referencedTable"] == "t"
        assert data["referencedColumns"] == ["x", "y"]


class TestIndexes:
    def test_unique_key(self):
        constraint = parse_constraint("UNIQUE KEY `uk_email` (`email`)")

        assert constraint.kind is ConstraintKind.UNIQUE
        assert constraint.name == "uk_email"
        assert constraint.columns == ("email",)

    def test_unique_without_name(self):
        constraint = parse_constraint("UNIQUE (email, tenant_id)")

        assert constraint.name is None
        assert constraint.columns == ("email", "tenant_id")

    def test_key_prefix_lengths_and_order_dropped(self):
        constraint = parse_constraint("KEY idx_name (name(20), created_at DESC)")

        assert constraint.kind is ConstraintKind.INDEX
        assert constraint.name == "idx_name"
        assert constraint.columns == ("name", "created_at")

    def test_fulltext(self):
        constraint = parse_constraint("FULLTEXT KEY ft_body (body)")

        assert constraint.kind is ConstraintKind.INDEX
        assert constraint.name == "ft_body"

    def test_using_is_not_a_name(self):
        constraint = parse_constraint("INDEX USING BTREE (a)")

        assert constraint.name is None
        assert constraint.columns == ("a",)


class TestOtherConstraints:
    def test_check(self):
        constraint = parse_constraint("CONSTRAINT chk_age CHECK (age >= 0)")

        assert constraint.kind is ConstraintKind.CHECK
        assert constraint.name == "chk_age"
        assert constraint.columns == ()

    def test_unknown_shape(self):
        constraint = parse_constraint("CONSTRAINT weird EXCLUDE USING gist (c WITH &&)")

        assert constraint.kind is ConstraintKind.OTHER
        assert constraint.name == "weird"
