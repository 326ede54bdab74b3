# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""Parse SQL CREATE TABLE scripts into structured schema records."""

__version__ = "0.1.0"

from ddlschema.configuration.parser_config import ParseOptions  # noqa: E402
from ddlschema.schemas.table_models import (  # noqa: E402
    Column,
    EnumEntry,
    ParseResult,
    Relation,
    Table,
    TableConstraint,
    TypeInfo,
)
from ddlschema.utils.exceptions import DdlParseException, ErrorCode, StructuralParseError  # noqa: E402
from ddlschema.utils.sql_utils.ddl_parser import parse_ddl, parse_ddl_file  # noqa: E402
from ddlschema.utils.sql_utils.relations import extract_relations  # noqa: E402

__all__ = [
    "__version__",
    "parse_ddl",
    "parse_ddl_file",
    "extract_relations",
    "ParseOptions",
    "ParseResult",
    "Table",
    "Column",
    "TypeInfo",
    "EnumEntry",
    "TableConstraint",
    "Relation",
    "DdlParseException",
    "ErrorCode",
    "StructuralParseError",
]
