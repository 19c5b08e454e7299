"""
Generic autotools builder for nativebuild.

AutotoolsBuilder covers the common case of a project that only needs a
prefix, a few feature switches and dependency prefixes passed to configure.
"""

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from .base_builder import BaseBuilder
from ..configure import Configure


class AutotoolsBuilder(BaseBuilder):
    """Builder configured entirely through constructor arguments."""

    def __init__(self, project_name: str, src_dir: Union[str, Path],
                 install_dir: Union[str, Path],
                 libs: Iterable[str] = (),
                 enable: Iterable[str] = (),
                 disable: Iterable[str] = (),
                 pkg_prefixes: Optional[Dict[str, Union[str, Path]]] = None,
                 configure_env: Optional[Dict[str, str]] = None,
                 **kwargs):
        super().__init__(project_name, src_dir, install_dir, **kwargs)
        self.libs = list(libs)
        self.enable = list(enable)
        self.disable = list(disable)
        self.pkg_prefixes = dict(pkg_prefixes or {})
        self.configure_env = dict(configure_env or {})

    def get_libraries(self) -> List[str]:
        return list(self.libs)

    def configure_project(self, configure: Configure):
        """Prefix first, then package prefixes, enables and disables."""
        super().configure_project(configure)
        for pkg, path in self.pkg_prefixes.items():
            configure.with_pkg_prefix(pkg, path)
        for feature in self.enable:
            configure.enable(feature)
        for feature in self.disable:
            configure.disable(feature)
        for name, value in self.configure_env.items():
            configure.env(name, value)
