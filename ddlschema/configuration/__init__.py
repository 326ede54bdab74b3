# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

from .parser_config import ParseOptions, ParserConfig, load_parser_config

__all__ = ["ParseOptions", "ParserConfig", "load_parser_config"]
