from __future__ import annotations

"""
Scaffolding Error Hierarchy.

Every failure raised by the loader, the builder or the environment
collaborator derives from ScaffoldError and names the filesystem path (or
command) it concerns, so the interface layer can report it without
inspecting the chained OS error.
"""

from typing import Optional, Sequence


class ScaffoldError(Exception):
    """Base class for all mlcookie failures."""

    kind: str = "scaffold_error"

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path:
            return f"{self.message}: {self.path}"
        return self.message


# -----------------------------------------------------------------------------
# CONFIGURATION LOADING
# -----------------------------------------------------------------------------

class ConfigError(ScaffoldError):
    kind = "config_error"


class ConfigNotFoundError(ConfigError):
    kind = "config_not_found"


class ConfigReadError(ConfigError):
    kind = "config_read_error"


class ConfigParseError(ConfigError):
    """Malformed YAML. Carries the parser's diagnostic and position."""

    kind = "config_parse_error"

    def __init__(
            self,
            message: str,
            path: Optional[str] = None,
            *,
            line: Optional[int] = None,
            column: Optional[int] = None,
    ) -> None:
        super().__init__(message, path)
        self.line = line
        self.column = column

    def __str__(self) -> str:
        base = super().__str__()
        if self.line is not None:
            return f"{base} (line {self.line}, column {self.column})"
        return base


# -----------------------------------------------------------------------------
# STRUCTURE BUILDING
# -----------------------------------------------------------------------------

class BuildError(ScaffoldError):
    kind = "build_error"


class DirectoryCreateError(BuildError):
    kind = "directory_create_error"


class FileCreateError(BuildError):
    kind = "file_create_error"


# -----------------------------------------------------------------------------
# EXTERNAL PROCESSES
# -----------------------------------------------------------------------------

class ExternalCommandError(ScaffoldError):
    """An external command (virtual environment creation) failed."""

    kind = "external_command_error"

    def __init__(
            self,
            message: str,
            path: Optional[str] = None,
            *,
            command: Sequence[str] = (),
            returncode: Optional[int] = None,
            stderr: str = "",
    ) -> None:
        super().__init__(message, path)
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
