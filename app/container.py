import logging
from pathlib import Path
from typing import Sequence

from app.settings import AppConfig
from console.command_line import CommandLine
from services.command_stack import CommandHandler, build_default_command_stack
from services.document_manager import DocumentManager
from services.execution_queue import ExecutionQueue
from services.localization import Localization


logger = logging.getLogger(__name__)


def _logging_handler(command_name: str) -> CommandHandler:
    command_logger = logging.getLogger(f"commands.{command_name.lower()}")

    def _handler(args: Sequence[str]) -> None:
        command_logger.info("%s %s", command_name, " ".join(args))

    return _handler


def build_container(app_cfg: AppConfig):
    """
    Dependency container builder
    Responsibility
    - Takes a fully loaded config object
    - Constructs the registry, localization, execution queue and console exactly once
    - Returns a dictionary of ready-to-use services
    """

    project_root = Path(__file__).resolve().parents[1]

    # ----- Collaborators -----
    command_stack = build_default_command_stack(_logging_handler)
    localization = Localization(
        locale=app_cfg.locale.default_locale,
        available_locales=app_cfg.locale.available_locales,
    )
    execution_queue = ExecutionQueue()
    document_manager = DocumentManager(commands=command_stack)

    # ----- Console -----
    command_line = CommandLine(
        registry=command_stack,
        sink=execution_queue,
        localization=localization,
        config=app_cfg.command_line,
    )
    logger.info("Container built with %d command group(s)", len(command_stack.groups))

    return {
        "project_root": project_root,
        "command_stack": command_stack,
        "localization": localization,
        "execution_queue": execution_queue,
        "document_manager": document_manager,
        "command_line": command_line,
    }
