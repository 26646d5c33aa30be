"""
Use case for turning a raw input line into a pipeline.
"""

import logging
from typing import Optional, Union

from minishell.entities.pipeline import (
    HeredocRequest,
    Pipeline,
    Redirection,
    RedirectMode,
    Stage,
)
from minishell.exceptions import PipelineSyntaxError

PIPE = "|"
REDIRECT = ">"
APPEND = ">>"
HEREDOC_PREFIX = "cat >"
HEREDOC_APPEND_PREFIX = "cat >>"


class PipelineParser:
    """
    Split a line into pipe-separated stages and a trailing redirection.

    Rules:
    - A line starting with 'cat >' is a heredoc request and is never split on '|'.
    - Only the last segment may carry a redirection. The target is what follows
      the last '>', the command is what precedes the first '>', and the mode is
      append when the segment contains '>>'.
    - A single segment made only of '>' or '>>' followed by a file name and some
      words is the literal-content command, not a redirection.
    - Blank segments are kept as blank stages.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)

    def parse(self, line: str) -> Union[Pipeline, HeredocRequest]:
        """
        Parse one input line.

        Args:
            line: Raw input line

        Returns:
            A Pipeline, or a HeredocRequest for 'cat >' / 'cat >>'

        Raises:
            PipelineSyntaxError: If the line is empty or a file name is missing
        """
        line = line.strip()
        if not line:
            raise PipelineSyntaxError("Empty input line")

        if line.startswith(HEREDOC_PREFIX):
            return self._parse_heredoc(line)

        *head, last = [segment.strip() for segment in line.split(PIPE)]
        stages = [Stage.from_text(segment) for segment in head]

        if REDIRECT not in last:
            stages.append(Stage.from_text(last))
            return Pipeline(stages=stages)

        fragments = last.split(REDIRECT)
        command_text = fragments[0].strip()
        target = fragments[-1].strip()
        mode = RedirectMode.APPEND if APPEND in last else RedirectMode.OVERWRITE

        if not command_text and not head and len(target.split()) > 1:
            operator = APPEND if last.startswith(APPEND) else REDIRECT
            stages.append(
                Stage(name=operator, args=last[len(operator):].split(), raw=last)
            )
            return Pipeline(stages=stages)

        if not target:
            raise PipelineSyntaxError("Missing file name for redirection")

        stages.append(Stage.from_text(command_text))
        redirection = Redirection(target=target, mode=mode, command_text=command_text)
        self._logger.debug(
            f"Parsed {len(stages)} stage(s) redirected to {target} ({mode.name})"
        )
        return Pipeline(stages=stages, redirection=redirection)

    def _parse_heredoc(self, line: str) -> HeredocRequest:
        if line.startswith(HEREDOC_APPEND_PREFIX):
            mode = RedirectMode.APPEND
            target = line[len(HEREDOC_APPEND_PREFIX):].strip()
        else:
            mode = RedirectMode.OVERWRITE
            target = line[len(HEREDOC_PREFIX):].strip()
        if not target:
            raise PipelineSyntaxError("Usage: cat > <file_name>")
        return HeredocRequest(target=target, mode=mode)
