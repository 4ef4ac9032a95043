"""Project directory guard: create the directory, remove it again on failure."""

import os
import shutil
from contextlib import contextmanager

from nerd.errors import DirectoryExistsError, IoError


def create_project_dir(path: str) -> None:
    """Create *path* (but not its parents), translating OS errors."""
    try:
        os.mkdir(path)
    except FileExistsError:
        raise DirectoryExistsError(path)
    except OSError as e:
        raise IoError(f"Failed to create project dir: {e}", e)


def remove_project_dir(path: str) -> None:
    """Recursively delete *path*. Failures are ignored."""
    shutil.rmtree(path, ignore_errors=True)


@contextmanager
def project_directory(path: str):
    """Create *path* and roll it back if the body raises.

    A failure to create the directory propagates without cleanup since
    nothing was created. On normal exit the directory is kept.
    """
    create_project_dir(path)
    try:
        yield path
    except Exception:
        remove_project_dir(path)
        raise
