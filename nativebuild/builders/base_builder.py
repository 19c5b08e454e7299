"""
Base builder class for nativebuild.

This module provides the common lifecycle that all project builders
inherit: relocate, autogen, configure, make, check, install.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Union

from .. import config
from ..artifacts import Artifacts
from ..configure import Configure
from ..project import Project
from ..utils import print_configuration_summary, print_info, print_success


class BaseBuilder(ABC):
    """Base class for all project builders."""

    def __init__(self, project_name: str, src_dir: Union[str, Path],
                 install_dir: Union[str, Path],
                 build_dir: Optional[Union[str, Path]] = None,
                 move_source: bool = False, run_checks: bool = False):
        self.project = Project(project_name, src_dir)
        self.install_dir = Path(install_dir)
        self.build_dir = Path(build_dir) if build_dir is not None else None
        self.move_source = move_source
        self.run_checks = run_checks

    @property
    def project_name(self) -> str:
        return self.project.project_name

    @abstractmethod
    def get_libraries(self) -> List[str]:
        """Get the static libraries the install provides, in link order."""

    def configure_project(self, configure: Configure):
        """Add configure arguments. Override to add more than the prefix."""
        configure.prefix(self.install_dir)

    def needs_autogen(self) -> bool:
        """Whether the configure script has to be generated first."""
        return not (self.project.src_dir / config.CONFIGURE_SCRIPT).exists()

    def pre_build_setup(self):
        """Perform any pre-build setup. Override in subclasses if needed."""

    def post_build_setup(self):
        """Perform any post-build setup. Override in subclasses if needed."""

    def relocate_source(self):
        if self.build_dir is None:
            return
        if self.move_source:
            self.project.mv_src(self.build_dir)
        else:
            self.project.cp_src(self.build_dir)

    def build(self) -> Artifacts:
        """Build and install the project following the standard process.

        Any failing stage raises and stops the build there.
        """
        print_info(f"Building {self.project_name}...")
        if config.VERBOSE:
            print_configuration_summary(config.get_configuration())

        self.relocate_source()
        self.pre_build_setup()

        if self.needs_autogen():
            self.project.autogen()

        configure = self.project.configure()
        self.configure_project(configure)
        configure.configure()

        self.project.make()
        if self.run_checks:
            self.project.check()
        self.project.install()

        self.post_build_setup()

        print_success(f"Successfully built {self.project_name}")
        return Artifacts.from_prefix(self.install_dir, self.get_libraries())
