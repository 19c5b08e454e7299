"""
Project pipeline for nativebuild.

A Project owns the working source directory of one native project and runs
the autogen, configure, make, check and install stages in it. It can also
relocate that directory to a writable build location before building.
"""

import shutil
from pathlib import Path
from typing import Union

from . import config
from .configure import Configure
from .copier import copy_tree
from .errors import FilesystemError
from .utils import print_info, print_warning, run_command


def _remove_tree(path: Path):
    """Remove a directory tree, or only the link when ``path`` is a symlink."""
    if path.is_symlink():
        path.unlink()
    else:
        shutil.rmtree(path)


class Project:
    """One autotools source tree under management."""

    def __init__(self, project_name: str, src_dir: Union[str, Path]):
        self.project_name = project_name
        self.src_dir = Path(src_dir)

    def __repr__(self):
        return f"Project({self.project_name!r}, {str(self.src_dir)!r})"

    # -------------------------------------------------------------------------
    # Relocation
    # -------------------------------------------------------------------------

    def cp_src(self, new_src_dir: Union[str, Path]) -> None:
        """Copy the source tree to ``new_src_dir`` and build from there.

        Anything already at ``new_src_dir`` is removed first. The current
        directory is left untouched.
        """
        new_src_dir = Path(new_src_dir)
        if config.VERBOSE:
            print_info(f"Copying {self.project_name} source from {self.src_dir} to {new_src_dir}")

        try:
            if new_src_dir.is_symlink() or new_src_dir.exists():
                print_warning(f"Replacing existing {new_src_dir}")
                _remove_tree(new_src_dir)
            new_src_dir.mkdir(parents=True, exist_ok=True)
            copy_tree(self.src_dir, new_src_dir)
        except OSError as e:
            raise FilesystemError(
                f"copying the source of {self.project_name}", new_src_dir, e) from e

        self.src_dir = new_src_dir

    def mv_src(self, new_src_dir: Union[str, Path]) -> None:
        """Copy the source tree to ``new_src_dir``, then delete the old one."""
        old_src_dir = self.src_dir
        self.cp_src(new_src_dir)

        try:
            _remove_tree(old_src_dir)
        except OSError as e:
            raise FilesystemError(
                f"removing the old source of {self.project_name}", old_src_dir, e) from e

    # -------------------------------------------------------------------------
    # Pipeline stages
    # -------------------------------------------------------------------------

    def autogen(self) -> None:
        """Generate the configure script for trees that don't ship one."""
        run_command(
            [config.AUTOGEN_SCRIPT], self.src_dir,
            f"generating the configure script for {self.project_name} using autogen.sh")

    def configure(self) -> Configure:
        """Start a configure invocation bound to the current source directory."""
        return Configure(self.project_name, self.src_dir)

    def make(self) -> None:
        run_command([config.MAKE, f"-j{config.MAKE_JOBS}"], self.src_dir,
                    f"building {self.project_name}")

    def check(self) -> None:
        run_command([config.MAKE, 'check'], self.src_dir,
                    f"checking {self.project_name}")

    def install(self) -> None:
        run_command([config.MAKE, 'install'], self.src_dir,
                    f"installing {self.project_name}")
