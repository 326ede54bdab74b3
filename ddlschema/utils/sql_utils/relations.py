# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
Table relation extraction for ER diagrams.

Explicit relations come from FOREIGN KEY constraints. Implicit relations follow
the ``<entity>_id`` naming convention: ``orders.user_id`` points at ``users.id``
(or ``user.id``) when such a table was parsed.
"""

from typing import Dict, List, Optional, Set, Tuple

from ddlschema.schemas.table_models import ParseResult, Relation, Table
from ddlschema.utils.constants import ConstraintKind
from ddlschema.utils.loggings import get_logger

logger = get_logger(__name__)

_ID_COLUMN = "id"
_ID_SUFFIX = "_id"


def extract_relations(result: ParseResult, infer: bool = True) -> List[Relation]:
    """
    Collect many-to-one relations between parsed tables.

    Args:
        result: Parsed tables
        infer: Also derive relations from ``<entity>_id`` column names

    Returns:
        Relations in table order; explicit ones of a table come before inferred ones
    """
    tables_by_name: Dict[str, Table] = {}
    for table in result:
        tables_by_name.setdefault(table.name.lower(), table)

    relations: List[Relation] = []
    for table in result:
        covered: Set[str] = set()
        for from_column, to_table, to_column in _foreign_key_pairs(table, tables_by_name):
            covered.add(from_column.lower())
            relations.append(
                Relation(
                    from_table=table.name,
                    from_column=from_column,
                    to_table=to_table,
                    to_column=to_column,
                    explicit=True,
                )
            )

        if not infer:
            continue

        for column in table.columns:
            lowered = column.name.lower()
            if lowered == _ID_COLUMN or not lowered.endswith(_ID_SUFFIX) or lowered in covered:
                continue
            target = _guess_target_table(lowered[: -len(_ID_SUFFIX)], tables_by_name)
            if target is None:
                continue
            relations.append(
                Relation(
                    from_table=table.name,
                    from_column=column.name,
                    to_table=target.name,
                    to_column=_ID_COLUMN,
                    explicit=False,
                )
            )

    logger.debug(f"Extracted {len(relations)} relation(s) from {len(result)} table(s)")
    return relations


def _foreign_key_pairs(table: Table, tables_by_name: Dict[str, Table]) -> List[Tuple[str, str, str]]:
    pairs = []
    for constraint in table.constraints:
        if constraint.kind != ConstraintKind.FOREIGN_KEY or not constraint.referenced_table:
            continue

        referenced_columns = list(constraint.referenced_columns)
        if not referenced_columns:
            # REFERENCES without a column list targets the referenced primary key
            target = tables_by_name.get(constraint.referenced_table.lower())
            referenced_columns = target.primary_key_columns() if target else []
        if len(referenced_columns) < len(constraint.columns):
            referenced_columns += [_ID_COLUMN] * (len(constraint.columns) - len(referenced_columns))

        for from_column, to_column in zip(constraint.columns, referenced_columns):
            pairs.append((from_column, constraint.referenced_table, to_column))
    return pairs


def _guess_target_table(entity: str, tables_by_name: Dict[str, Table]) -> Optional[Table]:
    if not entity:
        return None
    for candidate in (f"{entity}s", entity):
        if candidate in tables_by_name:
            return tables_by_name[candidate]
    return None
