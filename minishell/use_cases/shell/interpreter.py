"""
Interactive shell interpreter: the read-parse-execute loop around a session.
"""

import logging
from typing import Optional

from minishell.entities.command import CommandResult, ShellContext
from minishell.entities.pipeline import HeredocRequest
from minishell.exceptions import PipelineSyntaxError
from minishell.use_cases.shell.capture_input import CaptureInputUseCase
from minishell.use_cases.shell.execute_pipeline import PipelineExecutor
from minishell.use_cases.shell.parse_pipeline import PipelineParser
from minishell.use_cases.shell.resolve_redirection import RedirectionResolver

HEREDOC_BANNER = "Enter text (type 'exit' on a new line to finish):"
PROMPT_SUFFIX = "$ "


class ShellInterpreter:
    """Process input lines for one session until it exits or input runs out."""

    def __init__(
        self,
        context: ShellContext,
        parser: PipelineParser,
        executor: PipelineExecutor,
        resolver: RedirectionResolver,
        capture: CaptureInputUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the interpreter.

        Args:
            context: Session plus the console streams it reads from and writes to
            parser: Line to pipeline parser
            executor: Pipeline runner
            resolver: Writer used when a heredoc capture ends
            capture: Read-until-sentinel sub-loop
            logger: Logger instance to use for logging
        """
        self._context = context
        self._parser = parser
        self._executor = executor
        self._resolver = resolver
        self._capture = capture
        self._logger = logger or logging.getLogger(__name__)

    @property
    def context(self) -> ShellContext:
        return self._context

    def prompt(self) -> str:
        return f"{self._context.session.current_directory}{PROMPT_SUFFIX}"

    def process_line(self, line: str) -> Optional[CommandResult]:
        """
        Parse and execute one input line.

        Args:
            line: Raw line as typed

        Returns:
            The pipeline's final result, or None for blank and rejected lines
        """
        line = line.strip()
        if not line:
            return None

        output = self._context.output
        try:
            parsed = self._parser.parse(line)
        except PipelineSyntaxError as e:
            output.write(f"{e}\n")
            return None

        if isinstance(parsed, HeredocRequest):
            return self._run_heredoc(parsed)

        result = self._executor.execute(parsed, self._context)
        if result.terminate:
            output.write("Exiting...\n")
        return result

    def _run_heredoc(self, request: HeredocRequest) -> CommandResult:
        content = self._capture.execute(self._context, HEREDOC_BANNER)
        status = self._resolver.write(
            self._context.session, request.target, content, request.mode
        )
        self._context.output.write(status)
        return CommandResult(status)

    def run(self) -> int:
        """
        Run the loop until 'exit' or end of input.

        Returns:
            Process exit status (always 0)
        """
        session = self._context.session
        self._logger.info(
            f"Session {session.session_id} started in {session.current_directory}"
        )
        while session.running:
            line = self._context.reader.read_line(self.prompt())
            if line is None:
                self._logger.info("End of input, leaving the loop")
                break
            self.process_line(line)
        return 0
