"""CLI entrypoint for observable."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from importlib import metadata
import json
from pathlib import Path

from .config import load_config, subject_config
from .events import Subject
from .logging_utils import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="observable-subject",
        description="observable-subject - in-memory publish/subscribe subject",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a config.toml (defaults to ~/.config/observable-subject/config.toml)",
    )
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Handle CLI flags, load configuration and report the dispatch policy."""

    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.version:
        try:
            version = metadata.version("observable-subject")
        except metadata.PackageNotFoundError:
            version = "0.0.0"
        print(f"observable-subject {version}")
        return

    config = load_config(config_path=args.config)
    if args.show_config:
        print(json.dumps(config, indent=2, sort_keys=True))
        return

    configure_logging(config["logging"])
    subject = Subject(config=subject_config(config))
    print(
        f"dispatch={subject.config.dispatch} "
        f"reject_empty_names={str(subject.config.reject_empty_names).lower()}"
    )


if __name__ == "__main__":
    main()
