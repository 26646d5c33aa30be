"""
Pipeline domain entities produced by the parser.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class RedirectMode(Enum):
    """How a redirection writes to its target file."""

    OVERWRITE = ">"
    APPEND = ">>"

    @property
    def append(self) -> bool:
        return self is RedirectMode.APPEND


@dataclass(frozen=True)
class Stage:
    """One command segment of a pipeline."""

    name: str
    args: list[str] = field(default_factory=list)
    raw: str = ""

    @property
    def is_blank(self) -> bool:
        return not self.name

    @classmethod
    def from_text(cls, text: str) -> "Stage":
        """Tokenize a segment on whitespace; the name keeps the case it was typed in."""
        tokens = text.split()
        if not tokens:
            return cls(name="", args=[], raw=text.strip())
        return cls(name=tokens[0], args=tokens[1:], raw=text.strip())


@dataclass(frozen=True)
class Redirection:
    """Trailing redirection attached to the last stage of a pipeline."""

    target: str
    mode: RedirectMode
    command_text: str = ""


@dataclass(frozen=True)
class Pipeline:
    """Ordered stages split on '|', with an optional trailing redirection."""

    stages: list[Stage]
    redirection: Optional[Redirection] = None


@dataclass(frozen=True)
class HeredocRequest:
    """A 'cat >' / 'cat >>' line: capture lines interactively into a file."""

    target: str
    mode: RedirectMode
