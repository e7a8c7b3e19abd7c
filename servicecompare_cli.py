"""
servicecompare CLI

Entry point: environment loading, argument parsing and dispatch only.
All command logic lives in cli.handlers.
"""

from __future__ import annotations

import sys
from pathlib import Path

from dotenv import load_dotenv

from cli.wiring import build_parser, dispatch_command
from servicecompare import __version__


def _load_environment(env_file: Path | None = None) -> None:
    """Load project .env; its values override exported SERVICECOMPARE_* variables."""
    path = env_file if env_file is not None else Path.cwd() / ".env"
    if path.is_file():
        load_dotenv(path, override=True)


def main(argv: list[str] | None = None) -> int:
    _load_environment()
    parser = build_parser(version=__version__)
    args = parser.parse_args(argv)
    return dispatch_command(parser, args)


if __name__ == "__main__":
    sys.exit(main())
