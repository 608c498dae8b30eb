"""Command-line entry point: back up Google docs into a local directory."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from gdocbackup.auth import AuthInfo, default_config_dir
from gdocbackup.controller import GoogleDriveController
from gdocbackup.errors import GDocBackupError
from gdocbackup.sync import SyncEngine

LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Send gdocbackup logs to stderr; DEBUG when verbose, INFO otherwise."""
    logger = logging.getLogger("gdocbackup")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gdocbackup",
        description="Incrementally back up Google Docs, Sheets, Slides and Forms.",
    )
    parser.add_argument(
        "-d",
        "--destination",
        required=True,
        help="Local directory to place backup files in",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show verbose debug information",
    )
    return parser


def backup(destination: str, controller: GoogleDriveController) -> None:
    SyncEngine(controller, destination).run()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args, extra = parser.parse_known_args(argv)
    if extra:
        print(
            "Extra arguments provided! Did you mean to use `--destination`?",
            file=sys.stderr,
        )
        return 1

    setup_logging(args.verbose)
    destination = os.path.abspath(os.path.expanduser(args.destination))

    try:
        auth_info = AuthInfo.from_config_dir(default_config_dir())
        controller = GoogleDriveController(auth_info)
        backup(destination, controller)
    except GDocBackupError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
