# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
Unit tests for relation extraction between parsed tables.
"""

from ddlschema.utils.sql_utils.ddl_parser import parse_ddl
from ddlschema.utils.sql_utils.relations import extract_relations

DDL = """
CREATE TABLE users (id INT PRIMARY KEY, name VARCHAR(20));
CREATE TABLE category (id INT PRIMARY KEY);
CREATE TABLE products (
  id INT PRIMARY KEY,
  category_id INT,
  owner_id INT,
  vendor_id INT
);
CREATE TABLE orders (
  id INT,
  user_id INT,
  product_id INT,
  CONSTRAINT fk_user FOREIGN KEY (user_id) REFERENCES users (id)
);
"""


class TestExtractRelations:
    """Explicit and inferred relations."""

    def test_explicit_and_inferred(self):
        relations = extract_relations(parse_ddl(DDL))
        triples = [(r.from_table, r.from_column, r.to_table, r.explicit) for r in relations]

        assert triples == [
            ("products", "category_id", "category", False),
            ("orders", "user_id", "users", True),
            ("orders", "product_id", "products", False),
        ]

    def test_inferred_relations_point_at_id(self):
        relations = extract_relations(parse_ddl(DDL))

        assert all(relation.to_column == "id" for relation in relations)
        assert all(relation.type == "many-to-one" for relation in relations)

    def test_explicit_column_not_inferred_twice(self):
        relations = extract_relations(parse_ddl(DDL))
        assert len([r for r in relations if r.from_column == "user_id"]) == 1

    def test_infer_disabled(self):
        relations = extract_relations(parse_ddl(DDL), infer=False)

        assert len(relations) == 1
        assert relations[0].explicit is True

    def test_references_without_columns_use_primary_key(self):
        sql = """
        CREATE TABLE accounts (code VARCHAR(8), PRIMARY KEY (code));
        CREATE TABLE invoices (id INT, account VARCHAR(8), FOREIGN KEY (account) REFERENCES accounts);
        """
        relations = extract_relations(parse_ddl(sql))

        assert [(r.from_column, r.to_table, r.to_column) for r in relations] == [("account", "accounts", "code")]

    def test_serialized_aliases(self):
        relation = extract_relations(parse_ddl(DDL), infer=False)[0]

        assert relation.to_dict() == {
            "fromTable": "orders",
            "fromColumn": "user_id",
            "toTable": "users",
            "toColumn": "id",
            "type": "many-to-one",
            "explicit": True,
        }
