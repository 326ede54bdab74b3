# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

from .table_models import (
    Column,
    EnumEntry,
    ParseResult,
    Relation,
    Table,
    TableConstraint,
    TypeInfo,
)

__all__ = [
    "Column",
    "EnumEntry",
    "ParseResult",
    "Relation",
    "Table",
    "TableConstraint",
    "TypeInfo",
]
