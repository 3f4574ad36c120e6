from __future__ import annotations

import argparse
import logging
from typing import Sequence

from app.container import build_container
from app.logging_setup import setup_logging
from app.settings import build_settings
from cli.shell import CliShell
from cli.tui_app import CadCommandLineApp


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cadcli")
    parser.add_argument("--locale", default=None, help="Override the startup locale.")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("tui")
    sub.add_parser("shell")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    command = args.command or "tui"

    app_cfg = build_settings()
    deps = build_container(app_cfg)
    log_path = setup_logging(app_cfg.logging, project_root=deps["project_root"])
    logger.info("Starting %s front end (log file %s)", command, log_path)

    localization = deps["localization"]
    try:
        if args.locale:
            localization.set_locale(args.locale)
    except ValueError as exc:
        print(f"Error: {exc}")
        return 2

    if command == "shell":
        return CliShell(
            command_line=deps["command_line"],
            execution_queue=deps["execution_queue"],
            document_manager=deps["document_manager"],
            localization=localization,
        ).run()

    app = CadCommandLineApp(
        command_line=deps["command_line"],
        execution_queue=deps["execution_queue"],
        document_manager=deps["document_manager"],
        localization=localization,
    )
    app.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
