from __future__ import annotations

"""
Virtual environment collaborator.

The engine only knows the ``EnvironmentCreator`` protocol; the default
implementation spawns ``<python> -m venv <path>`` and reports success or
failure without interpreting the command's output.
"""

import logging
import subprocess
import sys
from pathlib import Path
from typing import List, Optional, Protocol

from mlcookie.domain.errors import ExternalCommandError

logger = logging.getLogger(__name__)


class EnvironmentCreator(Protocol):
    def create_environment(self, path: Path) -> None:
        """Create an environment at ``path`` or raise ExternalCommandError."""
        ...


class VenvCreator:
    """
    Create environments with the standard library ``venv`` module of a
    given interpreter.

    Args:
        python: Interpreter executable. Defaults to the running interpreter.
        timeout: Seconds before the spawn is abandoned. None waits forever.
    """

    def __init__(self, python: Optional[str] = None, timeout: Optional[float] = None) -> None:
        self.python = python or sys.executable
        self.timeout = timeout

    def command(self, path: Path) -> List[str]:
        return [self.python, "-m", "venv", str(path)]

    def create_environment(self, path: Path) -> None:
        cmd = self.command(path)
        logger.info(f"Creating virtual environment: {' '.join(cmd)}")
        try:
            completed = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise ExternalCommandError(
                f"Failed to run virtual environment command ({e})",
                str(path),
                command=cmd,
            ) from e

        if completed.returncode != 0:
            stderr = (completed.stderr or "").strip()
            logger.debug(f"venv stderr: {stderr}")
            raise ExternalCommandError(
                f"Virtual environment creation exited with status {completed.returncode}",
                str(path),
                command=cmd,
                returncode=completed.returncode,
                stderr=stderr,
            )
