# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
Schema records produced by the DDL parser.

All models are frozen after construction. Python attributes are snake_case;
``model_dump(by_alias=True)`` yields the camelCase map consumed by downstream
generators (``defaultValue``, ``autoIncrement``, ``enumValues`` ...).
"""

from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from ddlschema.utils.constants import ConstraintKind, TypeCategory

DefaultValue = Union[int, float, str, None]


class SchemaBaseModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        """Plain nested map with camelCase keys."""
        return self.model_dump(by_alias=True, mode="json")


class EnumEntry(SchemaBaseModel):
    """One (value, label) pair decoded from a column comment."""

    value: int = Field(..., description="Integer code")
    label: str = Field(..., description="Trimmed label text")


class TypeInfo(SchemaBaseModel):
    """Normalized column type."""

    name: str = Field(..., description="Uppercased base type keyword")
    length: Optional[str] = Field(None, description="Raw length/precision text, e.g. '10,2'")
    original_type: str = Field(..., alias="originalType", description="Type token exactly as written")
    category: TypeCategory = Field(TypeCategory.OTHER, description="Dialect-independent type family")

    def _length_parts(self) -> List[Optional[int]]:
        if not self.length:
            return []
        parts = []
        for part in self.length.split(","):
            part = part.strip()
            parts.append(int(part) if part.isdigit() else None)
        return parts

    @property
    def precision(self) -> Optional[int]:
        """First numeric component of ``length`` (size or precision)."""
        parts = self._length_parts()
        return parts[0] if parts else None

    @property
    def scale(self) -> Optional[int]:
        """Second numeric component of ``length``, e.g. 2 for DECIMAL(10,2)."""
        parts = self._length_parts()
        return parts[1] if len(parts) > 1 else None


class Column(SchemaBaseModel):
    name: str = Field(..., min_length=1)
    type: TypeInfo
    nullable: bool = True
    default_value: DefaultValue = Field(None, alias="defaultValue")
    auto_increment: bool = Field(False, alias="autoIncrement")
    primary_key: bool = Field(False, alias="primaryKey")
    comment: str = ""
    enum_values: Optional[Tuple[EnumEntry, ...]] = Field(None, alias="enumValues")


class TableConstraint(SchemaBaseModel):
    """A table-level clause set aside from the column list."""

    kind: ConstraintKind
    name: Optional[str] = None
    columns: Tuple[str, ...] = ()
    referenced_table: Optional[str] = Field(None, alias="referencedTable")
    referenced_columns: Tuple[str, ...] = Field((), alias="referencedColumns")
    definition: str = Field("", description="Raw clause text")


class Table(SchemaBaseModel):
    name: str = Field(..., min_length=1)
    comment: str = ""
    columns: Tuple[Column, ...] = ()
    constraints: Tuple[TableConstraint, ...] = ()

    def find_column(self, name: str) -> Optional[Column]:
        """Case-insensitive column lookup."""
        lowered = name.lower()
        for column in self.columns:
            if column.name.lower() == lowered:
                return column
        return None

    def primary_key_columns(self) -> List[str]:
        """
        Reconcile column-level and table-level primary key declarations.

        Column-level ``PRIMARY KEY`` markers come first, in column order, followed
        by columns named in table-level primary key constraints that were not
        already listed. Neither source is treated as authoritative.
        """
        result: List[str] = []
        seen = set()
        for column in self.columns:
            if column.primary_key and column.name.lower() not in seen:
                seen.add(column.name.lower())
                result.append(column.name)
        for constraint in self.constraints:
            if constraint.kind != ConstraintKind.PRIMARY_KEY:
                continue
            for name in constraint.columns:
                if name.lower() not in seen:
                    seen.add(name.lower())
                    result.append(name)
        return result


class Relation(SchemaBaseModel):
    """Many-to-one link between two parsed tables."""

    from_table: str = Field(..., alias="fromTable")
    from_column: str = Field(..., alias="fromColumn")
    to_table: str = Field(..., alias="toTable")
    to_column: str = Field(..., alias="toColumn")
    type: str = "many-to-one"
    explicit: bool = True


class ParseResult(SchemaBaseModel):
    """Ordered tables of one parse call, in statement order."""

    tables: Tuple[Table, ...] = ()

    def __iter__(self) -> Iterator[Table]:  # type: ignore[override]
        return iter(self.tables)

    def __len__(self) -> int:
        return len(self.tables)

    def __getitem__(self, index: int) -> Table:
        return self.tables[index]

    def get_tables(self, name: str) -> List[Table]:
        """All tables with the given name (case-insensitive); duplicates are kept."""
        lowered = name.lower()
        return [table for table in self.tables if table.name.lower() == lowered]

    def summary(self) -> Dict[str, int]:
        return {
            "tableCount": len(self.tables),
            "totalFields": sum(len(table.columns) for table in self.tables),
        }

    def to_simplified_schema(self) -> Dict[str, Dict[str, Any]]:
        """
        Table-keyed map holding only field name, original type and comment.

        A later table with the same name replaces an earlier one in this view.
        """
        schema: Dict[str, Dict[str, Any]] = {}
        for table in self.tables:
            schema[table.name] = {
                "comment": table.comment,
                "fields": [
                    {"name": column.name, "type": column.type.original_type, "comment": column.comment}
                    for column in table.columns
                ],
            }
        return schema
