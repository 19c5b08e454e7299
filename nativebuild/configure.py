"""
Configure invocation builder for nativebuild.

A Configure collects ./configure arguments in the order they are added and
runs them exactly once.
"""

from pathlib import Path
from typing import Dict, List, Union

from . import config
from .errors import FinalizedError
from .utils import run_command


class Configure:
    """A pending ./configure run for one project."""

    def __init__(self, project_name: str, src_dir: Union[str, Path]):
        self.project_name = project_name
        self._src_dir = Path(src_dir)
        self._args: List[str] = []
        self._env: Dict[str, str] = {}
        self._finalized = False

    @property
    def args(self) -> List[str]:
        return list(self._args)

    @property
    def environment(self) -> Dict[str, str]:
        return dict(self._env)

    @property
    def working_directory(self) -> Path:
        return self._src_dir

    @property
    def finalized(self) -> bool:
        return self._finalized

    def command(self) -> List[str]:
        """Get the full command line this invocation will run."""
        return [config.CONFIGURE_SCRIPT] + self._args

    def _check_not_finalized(self):
        if self._finalized:
            raise FinalizedError(self.project_name)

    def _arg(self, arg: str):
        self._check_not_finalized()
        self._args.append(arg)

    def src_dir(self, src_dir: Union[str, Path]):
        """Run ./configure in ``src_dir`` instead of the project's directory."""
        self._check_not_finalized()
        self._src_dir = Path(src_dir)

    def prefix(self, path: Union[str, Path]):
        self._arg(f"--prefix={path}")

    def with_pkg_prefix(self, pkg: str, path: Union[str, Path]):
        """Point configure at a dependency installed under ``path``."""
        self._arg(f"--with-{pkg}-prefix={path}")

    def enable(self, feature: str):
        self._arg(f"--enable-{feature}")

    def disable(self, feature: str):
        self._arg(f"--disable-{feature}")

    def env(self, name: str, value: str):
        """Set an environment variable for the configure process only."""
        self._check_not_finalized()
        self._env[name] = value

    def configure(self) -> None:
        """Run ./configure with the collected arguments.

        The invocation is spent afterwards, whether or not configure
        succeeded; any further call raises FinalizedError.
        """
        self._check_not_finalized()
        self._finalized = True
        run_command(self.command(), self._src_dir,
                    f"configuring {self.project_name}", env=self._env or None)
