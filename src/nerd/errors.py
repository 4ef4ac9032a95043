"""Errors raised while dispatching commands and scaffolding projects."""


class NerdError(Exception):
    """Base class for every failure reported to the user."""

    @property
    def message(self) -> str:
        return str(self)


class UsageError(NerdError):
    """Missing or malformed command-line arguments."""


class UnknownCommandError(NerdError):

    def __init__(self, command: str):
        super().__init__(f"Unknown command: {command}")
        self.command = command


class DirectoryExistsError(NerdError):

    def __init__(self, path: str):
        super().__init__(f"Failed to create project dir: Directory '{path}' already exists.")
        self.path = path


class IoError(NerdError):
    """An unexpected OS error, wrapped with the step that hit it."""

    def __init__(self, message: str, cause: OSError | None = None):
        super().__init__(message)
        self.cause = cause


class BuildToolMissingError(NerdError):

    def __init__(self, tool: str):
        super().__init__("Failed to generate build files: CMake not found.")
        self.tool = tool


class BuildConfigurationError(NerdError):
    """The build tool ran but exited with a non-zero status."""

    def __init__(self, stderr: str):
        self.stderr = stderr.strip()
        super().__init__(f"Failed to generate build files: CMake error.\n{self.stderr}")
