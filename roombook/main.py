from __future__ import annotations

import argparse
import logging
from pathlib import Path

from pydantic import ValidationError

from roombook.infrastructure.config import LOG_LEVELS, ConfigError, Settings, resolve_database_url
from roombook.infrastructure.gateway import DatabaseGateway, DatabaseUnavailableError
from roombook.presentation.console import ConsoleApp

logger = logging.getLogger("roombook")


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="roombook", description="Room reservation manager")
    parser.add_argument("command", nargs="?", choices=("menu", "browse"), default="menu")
    parser.add_argument("--config", type=Path, help="credentials file (JSON or YAML)")
    parser.add_argument("--database-url", help="SQLAlchemy URL, overrides the credentials file")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="logging level")
    return parser.parse_args(argv)


def _build_settings(args: argparse.Namespace) -> Settings:
    overrides = {
        "config_path": args.config,
        "database_url": args.database_url,
        "log_level": args.log_level,
    }
    return Settings(**{k: v for k, v in overrides.items() if v is not None})


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        settings = _build_settings(args)
    except ValidationError as e:
        logger.critical("Invalid settings: %s", e)
        return 1

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        gateway = DatabaseGateway.open(resolve_database_url(settings), create_schema=settings.create_schema)
    except ConfigError as e:
        logger.critical("Error loading config: %s", e)
        return 1
    except DatabaseUnavailableError as e:
        logger.critical("%s", e)
        return 1

    with gateway:
        app = ConsoleApp(gateway)
        if args.command == "browse":
            return app.run_browser()
        return app.run()


if __name__ == "__main__":
    raise SystemExit(main())
