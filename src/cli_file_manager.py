import argparse
import locale
import logging
import os
import sys
from typing import Optional

from src.config.settings import settings
from src.container import container
from src.exceptions import ConfigurationError


def _configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        filename=settings.log_file,
    )


def _username(value: str) -> str:
    if not value.strip():
        raise argparse.ArgumentTypeError("username must not be empty")
    return value


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="file-manager",
        description="Interactive file manager confined to the filesystem it starts in.",
    )
    parser.add_argument(
        "--username",
        required=True,
        type=_username,
        help="Name used to greet you, e.g. --username=alice",
    )
    parser.add_argument(
        "--start-dir",
        default=None,
        help="Directory to start in (default: FILE_MANAGER_START_DIR or your home)",
    )
    args = parser.parse_args(argv)

    _configure_logging()
    try:
        # Locale-aware ordering for ls
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        pass

    start_dir = os.path.abspath(os.path.expanduser(args.start_dir or settings.start_dir))
    if not os.path.isdir(start_dir):
        print(f"Error: start directory does not exist: {start_dir}", file=sys.stderr)
        return 2
    try:
        session = container.create_session(args.username, start_dir)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    return container.get_interpreter().run(session)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
