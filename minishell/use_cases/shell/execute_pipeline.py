"""
Use case for running a parsed pipeline.
"""

import logging
from typing import Optional

from minishell.entities.command import CommandInvocation, CommandResult, ShellContext
from minishell.entities.pipeline import Pipeline, Stage
from minishell.use_cases.commands.registry import CommandRegistry
from minishell.use_cases.shell.resolve_redirection import RedirectionResolver


class PipelineExecutor:
    """
    Run stages left to right, feeding each stage the previous stage's text.

    Only the last stage's text is written to the output, and only when it is
    non-empty and not redirected. A terminate result stops everything.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        resolver: RedirectionResolver,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the executor.

        Args:
            registry: Command table used to dispatch each stage
            resolver: Sink for a trailing redirection
            logger: Logger instance to use for logging
        """
        self._registry = registry
        self._resolver = resolver
        self._logger = logger or logging.getLogger(__name__)

    def _run_stage(
        self, stage: Stage, piped_input: Optional[str], context: ShellContext
    ) -> CommandResult:
        if stage.is_blank:
            return CommandResult(piped_input)
        self._logger.debug(f"Running stage: {stage.raw}")
        invocation = CommandInvocation(
            context=context, name=stage.name, args=list(stage.args), piped_input=piped_input
        )
        return self._registry.dispatch(invocation)

    def execute(self, pipeline: Pipeline, context: ShellContext) -> CommandResult:
        """
        Execute a pipeline.

        Args:
            pipeline: Parsed stages and optional redirection
            context: Session and console streams

        Returns:
            The last result produced (the redirection status when redirected)
        """
        result = CommandResult()
        for index, stage in enumerate(pipeline.stages):
            result = self._run_stage(stage, result.text, context)
            if result.terminate:
                self._logger.debug(f"Pipeline terminated at stage {index}")
                return result

        if pipeline.redirection is not None:
            status = self._resolver.resolve(
                pipeline.redirection, result.text, context.session
            )
            self._logger.debug(status.strip())
            return CommandResult(status)

        if result.text:
            context.output.write(result.text)
        return result
