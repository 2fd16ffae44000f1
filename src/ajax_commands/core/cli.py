"""
Command line entry point for serving Ajax callbacks.
"""

import argparse
import importlib
import logging
import os
import sys

import uvicorn
from fastapi import FastAPI

from ajax_commands.core.app.application_factory import build_app
from ajax_commands.core.config.app_config import AppConfig, LogLevel, load_config
from ajax_commands.core.common.logging_utils import (
    configure_logging_with_environment_tagging,
)

logger = logging.getLogger(__name__)


def build_cli_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Serve Ajax command callbacks")
    parser.add_argument(
        "--config",
        dest="config_file",
        metavar="PATH",
        default=os.getenv("AJAX_CONFIG"),
        help="Path to a YAML configuration file",
    )
    parser.add_argument("--host", default=None, help="Host to bind to")
    parser.add_argument("--port", type=int, default=None, help="Port to listen on")
    parser.add_argument(
        "--route-prefix",
        dest="route_prefix",
        default=None,
        help="URL prefix for callback endpoints (default: /ajax)",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        type=str.upper,
        choices=[level.value for level in LogLevel],
        default=None,
        help="Logging level",
    )
    parser.add_argument(
        "--log-file",
        dest="log_file",
        metavar="PATH",
        default=None,
        help="Also write logs to this file",
    )
    parser.add_argument(
        "--callbacks",
        dest="callback_modules",
        metavar="MODULE",
        action="append",
        default=[],
        help="Import MODULE so its callbacks register themselves (repeatable)",
    )
    return parser


def parse_cli_args(argv: list[str] | None = None) -> argparse.Namespace:
    return build_cli_parser().parse_args(argv)


def apply_cli_args(args: argparse.Namespace) -> AppConfig:
    """Load configuration and apply command line overrides on top of it."""
    cfg = load_config(args.config_file)

    updates: dict = {}
    if args.host is not None:
        updates["host"] = args.host
    if args.port is not None:
        updates["port"] = args.port
    if args.route_prefix is not None:
        updates["route_prefix"] = args.route_prefix
    logging_updates: dict = {}
    if args.log_level is not None:
        logging_updates["level"] = args.log_level
    if args.log_file is not None:
        logging_updates["log_file"] = args.log_file

    if not updates and not logging_updates:
        return cfg

    data = cfg.to_dict()
    data.update(updates)
    data["logging"] = {**data["logging"], **logging_updates}
    # Re-validate so overrides get the same normalization as file values
    return AppConfig(**data)


def main(
    argv: list[str] | None = None,
    build_app_fn=build_app,
) -> None:
    args = parse_cli_args(argv)
    cfg = apply_cli_args(args)

    configure_logging_with_environment_tagging(
        level=cfg.logging.level.value, log_file=cfg.logging.log_file
    )

    for module_name in args.callback_modules:
        logger.info("Loading ajax callbacks from %s", module_name)
        importlib.import_module(module_name)

    app: FastAPI = build_app_fn(cfg)
    logger.info("Starting ajax command server on %s:%d", cfg.host, cfg.port)
    uvicorn.run(app, host=cfg.host, port=cfg.port, log_config=None)


if __name__ == "__main__":
    main(sys.argv[1:])
