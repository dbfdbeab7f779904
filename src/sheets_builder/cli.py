"""CLI for sheets-builder - print Sheets API requests without sending them.

Usage:
    sheets-builder config                                  # Show configured auth
    sheets-builder get-spreadsheet <id> [--range R ...]    # Spreadsheet metadata
    sheets-builder get-values <id> <range>                 # Read values
    sheets-builder update-values <id> <range> --values-file values.json
    sheets-builder append-values <id> <range> < values.json
    sheets-builder clear-values <id> <range>               # Clear a range
    sheets-builder batch-get-values <id> <range> [<range> ...]

Auth is read from SHEETS_ACCESS_TOKEN / GOOGLE_API_KEY (or .env); the
--access-token and --api-key flags override it.
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import Any

from sheets_builder.builder import RequestBuilder
from sheets_builder.config import BuilderConfig, get_config_status
from sheets_builder.exceptions import SheetsBuilderError
from sheets_builder.models import (
    DateTimeRenderOption,
    HTTPRequest,
    InsertDataOption,
    MajorDimension,
    ValueInputOption,
    ValueRenderOption,
    value_range_body,
)


def _choices(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


def _load_values(path: str | None) -> list[list[Any]]:
    """Read a 2D JSON array of values from a file or stdin."""
    if path is None or path == "-":
        text = sys.stdin.read()
    else:
        text = Path(path).expanduser().read_text()

    values = json.loads(text)
    if not isinstance(values, list) or not all(isinstance(row, list) for row in values):
        raise ValueError("Values must be a JSON array of arrays")
    return values


def _print_request(request: HTTPRequest) -> int:
    print(json.dumps(request.as_dict(), indent=2))
    return 0


def cmd_config(config: BuilderConfig) -> int:
    """Show which settings are configured."""
    status = get_config_status(config)

    print(f"Base URL     : {status['base_url']}")
    print(f"API key      : {'[x]' if status['api_key'] else '[ ]'}")
    print(f"Access token : {'[x]' if status['access_token'] else '[ ]'}")
    print(f"Auth method  : {status['auth']}")
    return 0


def build_request(builder: RequestBuilder, args: argparse.Namespace) -> HTTPRequest:
    """Build the request selected by the parsed arguments."""
    if args.command == "get-spreadsheet":
        return builder.get_spreadsheet(
            args.spreadsheet_id,
            ranges=args.ranges,
            include_grid_data=args.include_grid_data,
            fields=args.fields,
        )

    if args.command == "get-values":
        return builder.get_values(
            args.spreadsheet_id,
            args.range,
            major_dimension=args.major_dimension,
            value_render_option=args.value_render_option,
            date_time_render_option=args.date_time_render_option,
        )

    if args.command in ("update-values", "append-values"):
        body = value_range_body(
            _load_values(args.values_file),
            major_dimension=args.major_dimension,
        )
        write_options = {
            "value_input_option": args.value_input_option,
            "include_values_in_response": args.include_values_in_response,
            "response_value_render_option": args.response_value_render_option,
            "response_date_time_render_option": args.response_date_time_render_option,
        }
        if args.command == "update-values":
            return builder.update_values(args.spreadsheet_id, args.range, body, **write_options)
        return builder.append_values(
            args.spreadsheet_id,
            args.range,
            body,
            insert_data_option=args.insert_data_option,
            **write_options,
        )

    if args.command == "clear-values":
        return builder.clear_values(args.spreadsheet_id, args.range)

    if args.command == "batch-get-values":
        return builder.batch_get_values(
            args.spreadsheet_id,
            args.ranges,
            major_dimension=args.major_dimension,
            value_render_option=args.value_render_option,
            date_time_render_option=args.date_time_render_option,
        )

    raise ValueError(f"Unknown command: {args.command}")


def _add_read_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--major-dimension", choices=_choices(MajorDimension))
    parser.add_argument("--value-render-option", choices=_choices(ValueRenderOption))
    parser.add_argument("--date-time-render-option", choices=_choices(DateTimeRenderOption))


def _add_write_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--values-file",
        help="JSON file with a 2D array of values (default: stdin)",
    )
    parser.add_argument("--major-dimension", choices=_choices(MajorDimension))
    parser.add_argument("--value-input-option", choices=_choices(ValueInputOption))
    parser.add_argument(
        "--include-values-in-response",
        action="store_true",
        help="Echo written values in the response",
    )
    parser.add_argument(
        "--response-value-render-option", choices=_choices(ValueRenderOption)
    )
    parser.add_argument(
        "--response-date-time-render-option", choices=_choices(DateTimeRenderOption)
    )


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="sheets-builder",
        description="Build Google Sheets API requests without sending them",
    )
    parser.add_argument("--base-url", help="API root (default: from SHEETS_BASE_URL)")
    parser.add_argument("--api-key", help="API key (default: from GOOGLE_API_KEY)")
    parser.add_argument(
        "--access-token", help="OAuth access token (default: from SHEETS_ACCESS_TOKEN)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command")

    # config
    subparsers.add_parser("config", help="Show configured settings")

    # get-spreadsheet
    spreadsheet_parser = subparsers.add_parser("get-spreadsheet", help="Spreadsheet metadata")
    spreadsheet_parser.add_argument("spreadsheet_id", help="Spreadsheet ID")
    spreadsheet_parser.add_argument(
        "--range", dest="ranges", action="append", help="Range to include (repeatable)"
    )
    spreadsheet_parser.add_argument(
        "--include-grid-data", action="store_true", help="Include cell data"
    )
    spreadsheet_parser.add_argument("--fields", help="Response field mask")

    # get-values
    get_parser = subparsers.add_parser("get-values", help="Read values from a range")
    get_parser.add_argument("spreadsheet_id", help="Spreadsheet ID")
    get_parser.add_argument("range", help="A1 notation (e.g., Sheet1!A1:C10)")
    _add_read_options(get_parser)

    # update-values
    update_parser = subparsers.add_parser("update-values", help="Write values to a range")
    update_parser.add_argument("spreadsheet_id", help="Spreadsheet ID")
    update_parser.add_argument("range", help="A1 notation (e.g., Sheet1!A1)")
    _add_write_options(update_parser)

    # append-values
    append_parser = subparsers.add_parser("append-values", help="Append rows after a table")
    append_parser.add_argument("spreadsheet_id", help="Spreadsheet ID")
    append_parser.add_argument("range", help="A1 notation (e.g., Sheet1!A1)")
    _add_write_options(append_parser)
    append_parser.add_argument("--insert-data-option", choices=_choices(InsertDataOption))

    # clear-values
    clear_parser = subparsers.add_parser("clear-values", help="Clear values from a range")
    clear_parser.add_argument("spreadsheet_id", help="Spreadsheet ID")
    clear_parser.add_argument("range", help="A1 notation (e.g., Sheet1!A1:C10)")

    # batch-get-values
    batch_parser = subparsers.add_parser("batch-get-values", help="Read several ranges")
    batch_parser.add_argument("spreadsheet_id", help="Spreadsheet ID")
    batch_parser.add_argument("ranges", nargs="+", help="A1 notation ranges")
    _add_read_options(batch_parser)

    args = parser.parse_args(argv if argv is not None else sys.argv[1:])

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    config = BuilderConfig.from_env()
    overrides = {
        "base_url": args.base_url,
        "api_key": args.api_key,
        "access_token": args.access_token,
    }
    config = dataclasses.replace(
        config, **{key: value for key, value in overrides.items() if value is not None}
    )

    if args.command == "config":
        return cmd_config(config)

    try:
        request = build_request(RequestBuilder.from_config(config), args)
    except (SheetsBuilderError, ValueError, OSError) as e:
        print(f"Error: {e}")
        return 1

    return _print_request(request)


if __name__ == "__main__":
    sys.exit(main())
