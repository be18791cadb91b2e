#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Command-line interface for the HubSpot connector.

Lets an operator replay a stored submission against HubSpot, print the
connector's fieldset, or check a configuration without a running CMS.
"""

import sys
import json
import argparse
from pathlib import Path
from typing import Optional, List

from pydantic import ValidationError

from . import default_registry
from .config import config, ConnectorConfig
from .models.submission import Submission
from .reporter import LOGGER_NAME
from .utils.logger import configure_logger, LoggerConfig


def setup_argparse() -> argparse.ArgumentParser:
    """
    Set up command-line argument parsing.

    Returns:
        argparse.ArgumentParser: Configured argument parser
    """
    parser = argparse.ArgumentParser(
        description="Forms to HubSpot connector",
        epilog="Forward CMS form submissions to HubSpot contacts.",
    )

    parser.add_argument(
        "command",
        choices=["process", "fieldset", "check-config"],
        help="Command to execute",
    )
    parser.add_argument(
        "--connector",
        type=str,
        default="hubspot",
        help="Connector handle (default: hubspot)",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="JSON file with the connector settings",
    )
    parser.add_argument(
        "--submission",
        type=str,
        help='JSON file with the submission: {"id": ..., "form": ..., "data": {...}}',
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Write log lines as JSON",
    )

    return parser


def check_config(connector_config_path: Optional[str]) -> List[str]:
    """
    Collect problems with the process settings and, if given, a connector config.

    Returns:
        List[str]: Problems found, empty when everything is usable
    """
    errors = config.validate()

    if connector_config_path:
        try:
            connector_config = ConnectorConfig.from_mapping(config.load_json_file(Path(connector_config_path)))
        except (ValueError, ValidationError) as e:
            # pydantic's ValidationError is a ValueError; json decode errors too.
            errors.append(f"Invalid connector configuration: {e}")
        else:
            if not connector_config.access_token:
                errors.append("access_token is required")
            if not connector_config.email_field:
                errors.append("email_field must not be empty")
            for index, mapping in enumerate(connector_config.field_mapping):
                if not mapping.form_field or not mapping.hubspot_property:
                    errors.append(f"field_mapping row {index + 1} is incomplete and will be ignored")

    return errors


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the application.

    Returns:
        int: Process exit code
    """
    parser = setup_argparse()
    args = parser.parse_args(argv)

    configure_logger(LoggerConfig(
        name=LOGGER_NAME,
        console_level=args.log_level or config.log_level,
        file_level=args.log_level or config.log_level,
        log_file=str(config.log_file_path) if config.log_file_path else None,
        json_logs=args.json_logs or config.json_logs,
    ))

    connector = default_registry().get(args.connector)
    if connector is None:
        print(f"Unknown connector: {args.connector}", file=sys.stderr)
        return 2

    if args.command == "fieldset":
        print(json.dumps(connector.fieldset(), indent=2))
        return 0

    if args.command == "check-config":
        errors = check_config(args.config)
        for error in errors:
            print(error)
        if errors:
            return 1
        print("Configuration OK")
        return 0

    # process
    if not args.config or not args.submission:
        parser.error("process requires --config and --submission")

    try:
        settings = config.load_json_file(Path(args.config))
        submission = Submission.from_dict(config.load_json_file(Path(args.submission)))
    except ValueError as e:
        print(f"Could not load input: {e}", file=sys.stderr)
        return 2

    connector.process(submission, settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
