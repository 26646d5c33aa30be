"""minishell package: a small Unix-style shell interpreter over the real filesystem.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []
