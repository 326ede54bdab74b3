# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

import logging

from rich.console import Console
from rich.logging import RichHandler

from ddlschema.utils.exceptions import DdlParseException, ErrorCode, StructuralParseError
from ddlschema.utils.loggings import ROOT_LOGGER_NAME, configure_logging, get_logger, level_from_verbosity


class TestExceptions:
    def test_default_message_from_code(self):
        error = DdlParseException(ErrorCode.CONFIG_INVALID)

        assert error.message == "Invalid parser configuration"
        assert str(error) == "error_code=100002, error_message=Invalid parser configuration"

    def test_message_args(self):
        error = DdlParseException(ErrorCode.DDL_FILE_NOT_FOUND, "Missing {path}", {"path": "a.sql"})
        assert error.message == "Missing a.sql"

    def test_structural_error_code(self):
        error = StructuralParseError()

        assert isinstance(error, DdlParseException)
        assert error.code is ErrorCode.DDL_NO_TABLE_FOUND
        assert error.code.code == "200001"


class TestLogging:
    def test_loggers_nest_under_package_root(self):
        assert get_logger("ddlschema.cli").name == "ddlschema.cli"
        assert get_logger("tests.helper").name == "ddlschema.tests.helper"

    def test_level_from_verbosity(self):
        assert level_from_verbosity(0) == logging.WARNING
        assert level_from_verbosity(1) == logging.INFO
        assert level_from_verbosity(3) == logging.DEBUG

    def test_configure_logging_replaces_handler(self):
        root = logging.getLogger(ROOT_LOGGER_NAME)
        try:
            configure_logging("info", console=Console(stderr=True))
            configure_logging(logging.DEBUG, console=Console(stderr=True))

            rich_handlers = [handler for handler in root.handlers if isinstance(handler, RichHandler)]
            assert len(rich_handlers) == 1
            assert root.level == logging.DEBUG
        finally:
            for handler in list(root.handlers):
                if isinstance(handler, RichHandler):
                    root.removeHandler(handler)
            root.setLevel(logging.NOTSET)
