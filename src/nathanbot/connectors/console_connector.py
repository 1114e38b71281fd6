# src/nathanbot/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import handle_command, handle_exit, handle_greet, is_exit_command
from ..core.state import AppState

logger = logging.getLogger(__name__)

LINE = "_" * 60


def _print_block(text: str) -> None:
    print(LINE)
    print(text, end="" if text.endswith("\n") else "\n")
    print(LINE)


def run_console_loop(
    state: AppState,
    *,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = _print_block,
) -> None:
    """
    Interactive REPL: greet once, then one command per line until `bye`.

    EOF and Ctrl+C end the session the same way `bye` does.
    """
    logger.info("Console connector started (%d tasks).", state.task_list.list_length())
    write(handle_greet())

    while True:
        try:
            user_input = read_line("").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            write(handle_exit())
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write(handle_exit())
            break

        if not user_input:
            continue

        write(handle_command(state.task_list, user_input))

        if is_exit_command(user_input):
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")
