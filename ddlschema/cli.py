# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
Command line entry point.

    ddlschema parse schema.sql -o build/schema.json --relations -v
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table as RichTable

from ddlschema import __version__
from ddlschema.configuration.parser_config import ParserConfig, load_parser_config
from ddlschema.schemas.table_models import ParseResult
from ddlschema.utils.exceptions import DdlParseException
from ddlschema.utils.loggings import configure_logging, get_logger, level_from_verbosity
from ddlschema.utils.sql_utils.ddl_parser import parse_ddl_file
from ddlschema.utils.sql_utils.relations import extract_relations

logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ddlschema",
        description="Extract table schemas from SQL CREATE TABLE scripts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Full schema as JSON on stdout
  ddlschema parse schema.sql

  # Simplified name/type/comment map written to a file
  ddlschema parse schema.sql --simplified -o build/schema.json

  # Include foreign key and <entity>_id relations, with debug logging
  ddlschema parse schema.sql --relations -vv
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command")
    parse_cmd = subparsers.add_parser("parse", help="Parse a DDL file and print its schema as JSON")
    parse_cmd.add_argument("file", help="Path to the .sql file")
    parse_cmd.add_argument("-o", "--output", help="Write JSON to this path instead of stdout")
    parse_cmd.add_argument("--simplified", action="store_true", help="Only table/field names, types and comments")
    parse_cmd.add_argument("--no-comments", action="store_true", help="Drop column comments from the output")
    parse_cmd.add_argument("--no-enums", action="store_true", help="Do not decode 【枚举】 comments")
    parse_cmd.add_argument("--relations", action="store_true", help="Add table relations to the output")
    parse_cmd.add_argument("--config", help="YAML file with parser settings")
    parse_cmd.add_argument("-v", "--verbose", action="count", default=0, help="-v for INFO, -vv for DEBUG")
    return parser


def resolve_config(args: argparse.Namespace) -> ParserConfig:
    """Load the YAML config (if any) and apply command line overrides."""
    config = load_parser_config(args.config) if args.config else ParserConfig()

    overrides: Dict[str, Any] = {}
    if args.output:
        overrides["output"] = args.output
    if args.simplified:
        overrides["simplified"] = True
    if args.no_comments:
        overrides["include_comments"] = False
    if args.no_enums:
        overrides["parse_enums"] = False
    if args.relations:
        overrides["relations"] = True
    return config.model_copy(update=overrides)


def build_payload(result: ParseResult, config: ParserConfig) -> Dict[str, Any]:
    payload: Dict[str, Any] = {}
    if config.simplified:
        payload["schema"] = result.to_simplified_schema()
    else:
        payload["tables"] = [table.to_dict() for table in result]
    if config.relations:
        payload["relations"] = [
            relation.to_dict() for relation in extract_relations(result, infer=config.infer_relations)
        ]
    payload["summary"] = result.summary()
    return payload


def print_summary(result: ParseResult, console: Console) -> None:
    summary_table = RichTable(title="Parsed tables")
    summary_table.add_column("Table", style="cyan")
    summary_table.add_column("Columns", justify="right")
    summary_table.add_column("Constraints", justify="right")
    summary_table.add_column("Comment")
    for table in result:
        summary_table.add_row(
            escape(table.name), str(len(table.columns)), str(len(table.constraints)), escape(table.comment)
        )
    console.print(summary_table)

    summary = result.summary()
    console.print(f"[green]{summary['tableCount']} table(s), {summary['totalFields']} field(s)[/]")


def run_parse(args: argparse.Namespace, console: Console) -> int:
    config = resolve_config(args)
    configure_logging(level_from_verbosity(args.verbose) if args.verbose else config.log_level, console=console)

    result = parse_ddl_file(args.file, options=config.to_parse_options())
    content = json.dumps(build_payload(result, config), ensure_ascii=False, indent=2)

    if config.output:
        output_path = Path(config.output).expanduser()
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content + "\n", encoding="utf-8")
        logger.info(f"Schema written to {output_path}")
    else:
        sys.stdout.write(content + "\n")

    print_summary(result, console)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help(sys.stderr)
        return 2

    console = Console(stderr=True)
    try:
        return run_parse(args, console)
    except DdlParseException as e:
        logger.error(f"Parsing failed: {e}")
        console.print(f"[bold red]Error:[/] {escape(e.message)}")
        return 1
