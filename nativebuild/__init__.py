"""
nativebuild - Autotools build helper for vendored native sources

This package drives the autogen, configure, make, make check and make
install pipeline of an autotools project from inside another build, and
prints the installed headers and libraries as build metadata.

Main modules:
- config: Environment variable overrides and fixed tool names
- utils: Colored output and command execution
- errors: Exception hierarchy
- copier: Recursive source tree copying
- configure: Configure argument builder
- project: Project pipeline and source relocation
- artifacts: Installed artifact description and metadata output
- builders: Whole-lifecycle builders

Usage:
    from nativebuild import Project, Artifacts

    project = Project('libfoo', 'vendor/libfoo')
    project.cp_src(out_dir / 'libfoo-build')
    cfg = project.configure()
    cfg.prefix(out_dir)
    cfg.disable('shared')
    cfg.configure()
    project.make()
    project.install()
    Artifacts.from_prefix(out_dir, ['foo']).print_cargo_metadata()
"""

__version__ = "1.0.0"
__author__ = "nativebuild"
__description__ = "Autotools build helper for vendored native sources"

# Make common functionality easily accessible
from .artifacts import Artifacts
from .configure import Configure
from .copier import copy_tree
from .errors import (
    Error, FilesystemError, FinalizedError, ProcessExitError,
    ProcessLaunchError
)
from .project import Project
from .utils import (
    print_info, print_success, print_warning, print_error, run_command
)

__all__ = [
    'Artifacts',
    'Configure',
    'Project',
    'copy_tree',
    'run_command',
    'Error',
    'FilesystemError',
    'FinalizedError',
    'ProcessExitError',
    'ProcessLaunchError',
    'print_info',
    'print_success',
    'print_warning',
    'print_error'
]
