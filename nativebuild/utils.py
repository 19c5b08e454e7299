"""
Utility functions for nativebuild.

This module provides colored operator output and the single command
execution primitive every pipeline stage goes through.
"""

import os
import subprocess
import sys
from pathlib import Path
from typing import Dict, List, Optional, Union

from .errors import ProcessExitError, ProcessLaunchError


# =============================================================================
# COLOR CODES AND OUTPUT
# =============================================================================

class Colors:
    BLUE = '\033[94m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    RESET = '\033[0m'


def print_info(message: str):
    """Print info message with color."""
    print(f"{Colors.BLUE}[INFO]{Colors.RESET} {message}")


def print_success(message: str):
    """Print success message with color."""
    print(f"{Colors.GREEN}[SUCCESS]{Colors.RESET} {message}")


def print_warning(message: str):
    """Print warning message with color."""
    print(f"{Colors.YELLOW}[WARNING]{Colors.RESET} {message}")


def print_error(message: str):
    """Print error message with color."""
    print(f"{Colors.RED}[ERROR]{Colors.RESET} {message}")


def print_configuration_summary(config_data: dict):
    """Print current configuration summary."""
    print_info("nativebuild configuration")
    for key, value in config_data.items():
        print_info(f"{key}: {value}")


# =============================================================================
# COMMAND EXECUTION
# =============================================================================

def format_command(cmd: List[str]) -> str:
    return ' '.join(str(part) for part in cmd)


def run_command(cmd: List[str], cwd: Union[str, Path], desc: str,
                env: Optional[Dict[str, str]] = None) -> None:
    """Run a command to completion, raising if it cannot start or fails.

    The child inherits this process's stdout and stderr. ``env`` entries are
    layered over the current environment. Returns nothing on success.

    Raises:
        ProcessLaunchError: the executable could not be started.
        ProcessExitError: the process exited with a non-zero status.
    """
    from .config import VERBOSE

    cmd = [str(part) for part in cmd]

    print_info(f"Running: {format_command(cmd)}")
    if VERBOSE:
        print_info(f"Working directory: {cwd}")
    # Keep our own lines ahead of the child's output
    sys.stdout.flush()

    full_env = os.environ.copy()
    if env:
        full_env.update(env)

    try:
        process = subprocess.Popen(cmd, cwd=cwd, env=full_env)
    except OSError as e:
        print_error(f"Failed to start {cmd[0]}: {e}")
        raise ProcessLaunchError(desc, cmd, e) from e

    process.wait()

    if process.returncode != 0:
        print_error(f"{desc} failed with exit status {process.returncode}")
        raise ProcessExitError(desc, cmd, process.returncode)
