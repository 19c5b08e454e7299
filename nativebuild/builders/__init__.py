"""
Builders package for nativebuild

This package contains builders that run a project's whole native build
lifecycle and return the installed artifacts.

Available builders:
- BaseBuilder: abstract lifecycle, subclass and implement get_libraries()
- AutotoolsBuilder: generic builder configured by constructor arguments
"""

from .base_builder import BaseBuilder
from .autotools import AutotoolsBuilder

__all__ = [
    'BaseBuilder',
    'AutotoolsBuilder'
]
