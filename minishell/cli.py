import argparse
import logging
import sys

from rich import box
from rich.console import Console
from rich.panel import Panel

from minishell.adapters.console.buffered_console import StreamLineReader
from minishell.adapters.console.rich_console import RichConsoleOutput, RichConsoleReader
from minishell.config.settings import settings
from minishell.container import container
from minishell.entities.session import Session
from minishell.exceptions import ConfigurationError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minishell",
        description="A small Unix-style shell working on the real filesystem.",
    )
    parser.add_argument(
        "-d",
        "--directory",
        default=None,
        help="Directory the session starts in (default: MINISHELL_START_DIR or cwd)",
    )
    parser.add_argument(
        "-c",
        "--command",
        dest="commands",
        action="append",
        default=None,
        help="Run this line and exit; repeat to run several lines in order",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: MINISHELL_LOG_LEVEL or WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    err_console = Console(stderr=True, highlight=False)

    try:
        level = settings.get_log_level(args.log_level)
        directory = settings.get_start_directory(args.directory)
    except ConfigurationError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        return 2

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    console = Console(highlight=False, soft_wrap=True)
    session = Session(current_directory=directory)
    output = RichConsoleOutput(console)

    if args.commands:
        # Interactive capture (cat >, bare cat) reads its lines from stdin
        interpreter = container.create_interpreter(
            session, output, StreamLineReader(sys.stdin)
        )
        for line in args.commands:
            if not session.running:
                break
            interpreter.process_line(line)
        return 0

    console.print(
        Panel(
            "Type 'help' for a list of commands, 'exit' to quit.",
            title="minishell",
            border_style="cyan",
            box=box.ROUNDED,
        )
    )
    interpreter = container.create_interpreter(session, output, RichConsoleReader(console))
    try:
        return interpreter.run()
    except KeyboardInterrupt:
        console.print()
        return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
