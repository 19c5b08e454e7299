"""
Configuration for nativebuild.

This module holds the environment variable overrides and the fixed names
of the scripts, tools and metadata keys the pipeline uses.
"""

import os
import multiprocessing


# =============================================================================
# CONFIGURATION VARIABLES - Override via environment variables
# =============================================================================

def detect_cpu_count():
    """Count the processing units this process may run on."""
    if hasattr(os, 'sched_getaffinity'):
        return len(os.sched_getaffinity(0))
    return multiprocessing.cpu_count()


# Number of parallel make jobs, defaults to the usable processing units
MAKE_JOBS = int(os.environ.get('MAKE_JOBS', str(detect_cpu_count())))

# Verbose output flag
VERBOSE = os.environ.get('VERBOSE', '').lower() in ('1', 'true', 'yes')


# =============================================================================
# TOOLS AND SCRIPTS
# =============================================================================

# Both scripts are run relative to the project's source directory
AUTOGEN_SCRIPT = './autogen.sh'
CONFIGURE_SCRIPT = './configure'

MAKE = 'make'

# Never copied when relocating a source tree
VCS_METADATA_DIR = '.git'


# =============================================================================
# BUILD METADATA KEYS
# =============================================================================

LINK_SEARCH_KEY = 'cargo:rustc-link-search'
LINK_LIB_KEY = 'cargo:rustc-link-lib'
INCLUDE_KEY = 'cargo:include'
LIB_KEY = 'cargo:lib'


def get_configuration():
    """Get the effective configuration as a flat dict."""
    return {
        'Make jobs': MAKE_JOBS,
        'Verbose': VERBOSE,
        'Autogen script': AUTOGEN_SCRIPT,
        'Configure script': CONFIGURE_SCRIPT,
        'Make': MAKE,
    }
