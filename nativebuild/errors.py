"""
Exceptions raised by nativebuild.

Every failure in the pipeline is fatal: nothing here is caught and retried
inside the package. Each exception carries a human-readable message and a
numeric code suitable for returning from a build script's main().
"""

from pathlib import Path
from typing import List, Union


class Error(Exception):
    """Base class for exceptions in this package.

    Attributes:
        error_message: Message composed by the specific error subclass.
        error_code: Scalar unique to each subclass, usable as an exit status.
    """

    CODE = -1

    def __init__(self, message: str = 'Unknown Error'):
        super().__init__(message)
        self._error_message = message
        self._error_code = self.CODE

    @property
    def error_message(self) -> str:
        return self._error_message

    @property
    def error_code(self) -> int:
        return self._error_code

    def __str__(self) -> str:
        return self.error_message


class FilesystemError(Error):
    """A copy, create or remove operation on a source tree failed."""

    CODE = 1

    def __init__(self, desc: str, path: Union[str, Path], error: OSError):
        self.desc = desc
        self.path = Path(path)
        self.os_error = error
        super().__init__(f"\n\nError: {desc}\n  Path: {path}\n  Cause: {error}\n\n")


class ProcessLaunchError(Error):
    """The executable for a step could not be started at all."""

    CODE = 2

    def __init__(self, desc: str, cmd: List[str], error: OSError):
        self.desc = desc
        self.cmd = list(cmd)
        self.os_error = error
        super().__init__(
            f"\n\nError: {desc}\n  Command: {' '.join(cmd)}\n  Cause: {error}\n\n")


class ProcessExitError(Error):
    """A step's process ran and exited with a non-zero status."""

    CODE = 3

    def __init__(self, desc: str, cmd: List[str], returncode: int):
        self.desc = desc
        self.cmd = list(cmd)
        self.returncode = returncode
        super().__init__(
            f"\n\nError: {desc}\n  Command: {' '.join(cmd)}\n  Exit status: {returncode}\n\n")


class FinalizedError(Error):
    """A configure invocation was used again after it already ran."""

    CODE = 4

    def __init__(self, project_name: str):
        self.project_name = project_name
        super().__init__(
            f"configure invocation for {project_name} has already been run")
