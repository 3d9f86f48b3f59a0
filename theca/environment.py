"""Access to process-wide state: environment variables, terminal, home."""

import os
import sys
from pathlib import Path
from typing import Protocol


class Environment(Protocol):
    """What theca needs to know about the process it runs in."""

    def env_var(self, name: str) -> str | None: ...

    def terminal_width(self) -> int: ...

    def home_dir(self) -> Path | None: ...


class SystemEnvironment:
    """Environment backed by the real OS."""

    def env_var(self, name: str) -> str | None:
        value = os.environ.get(name)
        return value or None

    def terminal_width(self) -> int:
        """Width of the terminal on stdout, or 0 if there is none."""
        try:
            size = os.get_terminal_size(sys.stdout.fileno())
        except (OSError, ValueError, AttributeError):
            return 0
        if size.columns == 0 or size.lines == 0:
            return 0
        return size.columns

    def home_dir(self) -> Path | None:
        try:
            return Path.home()
        except RuntimeError:
            return None
