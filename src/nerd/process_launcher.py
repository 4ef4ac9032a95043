"""ProcessLauncher: runs an external command and reports how it went.

Distinguishes a missing executable from other launch failures, and both
from a process that started and exited with some return code.
"""

import subprocess
from dataclasses import dataclass
from typing import List, Optional

NOT_FOUND = "not-found"
LAUNCH_ERROR = "launch-error"
EXITED = "exited"


@dataclass
class LaunchOutcome:
    """Result of trying to run an external command."""
    kind: str
    returncode: Optional[int] = None
    stderr: str = ""
    error_message: Optional[str] = None

    @classmethod
    def not_found(cls, error_message=None):
        return cls(kind=NOT_FOUND, error_message=error_message)

    @classmethod
    def launch_error(cls, error_message):
        return cls(kind=LAUNCH_ERROR, error_message=error_message)

    @classmethod
    def exited(cls, returncode, stderr=""):
        return cls(kind=EXITED, returncode=returncode, stderr=stderr)

    @property
    def succeeded(self) -> bool:
        return self.kind == EXITED and self.returncode == 0


class ProcessLauncher:
    """Runs commands to completion, discarding stdout and capturing stderr.

    Stderr is decoded leniently: bytes that are not valid UTF-8 are
    replaced rather than raising.
    """

    def launch(self, cmd: List[str]) -> LaunchOutcome:
        try:
            result = subprocess.run(
                cmd,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
                encoding="utf-8",
                errors="replace",
            )
        except FileNotFoundError as e:
            return LaunchOutcome.not_found(str(e))
        except OSError as e:
            return LaunchOutcome.launch_error(str(e))
        return LaunchOutcome.exited(result.returncode, result.stderr)
