# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
Parser options and the YAML configuration used by the command line.

``ParseOptions`` is what the library functions accept. ``ParserConfig`` adds the
settings that only matter to the CLI and can be loaded from a YAML file:

    include_comments: true
    parse_enums: true
    log_level: INFO
    simplified: false
    relations: true
    infer_relations: true
    output: build/schema.json
"""

import logging
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ddlschema.utils.exceptions import DdlParseException, ErrorCode
from ddlschema.utils.loggings import get_logger

logger = get_logger(__name__)


class ParseOptions(BaseModel):
    """Per-call parser switches."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    include_comments: bool = True
    parse_enums: bool = True


class ParserConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    include_comments: bool = True
    parse_enums: bool = True
    log_level: str = "WARNING"
    simplified: bool = False
    relations: bool = False
    infer_relations: bool = True
    output: Optional[str] = None

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    def to_parse_options(self) -> ParseOptions:
        return ParseOptions(include_comments=self.include_comments, parse_enums=self.parse_enums)


def load_parser_config(path: Union[str, Path]) -> ParserConfig:
    """
    Load a ParserConfig from a YAML file.

    Raises:
        DdlParseException: DDL_FILE_NOT_FOUND when the file is missing,
            CONFIG_INVALID when it is not a mapping or holds invalid values.
    """
    config_path = Path(path).expanduser()
    if not config_path.is_file():
        raise DdlParseException(ErrorCode.DDL_FILE_NOT_FOUND, f"Config file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise DdlParseException(ErrorCode.CONFIG_INVALID, f"Cannot read {config_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise DdlParseException(ErrorCode.CONFIG_INVALID, f"{config_path} must contain a mapping")

    try:
        config = ParserConfig(**data)
    except ValidationError as e:
        raise DdlParseException(ErrorCode.CONFIG_INVALID, f"Invalid config {config_path}: {e}") from e

    logger.debug(f"Loaded parser config from {config_path}: {config.model_dump()}")
    return config
