"""
Installed artifact description and build metadata output.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Tuple, Union

from .config import INCLUDE_KEY, LIB_KEY, LINK_LIB_KEY, LINK_SEARCH_KEY


@dataclass(frozen=True)
class Artifacts:
    """Where ``make install`` put a project's outputs.

    Nothing is checked against the filesystem. ``libs`` are in link order.
    """

    install_dir: Path
    bin_dir: Path
    include_dir: Path
    lib_dir: Path
    libs: Tuple[str, ...] = ()

    def __post_init__(self):
        # frozen, so normalize through object.__setattr__
        for name in ('install_dir', 'bin_dir', 'include_dir', 'lib_dir'):
            object.__setattr__(self, name, Path(getattr(self, name)))
        object.__setattr__(self, 'libs', tuple(self.libs))

    @classmethod
    def from_prefix(cls, prefix: Union[str, Path], libs: Iterable[str] = ()) -> 'Artifacts':
        """Describe an install under the usual bin/, include/ and lib/ layout."""
        prefix = Path(prefix)
        return cls(
            install_dir=prefix,
            bin_dir=prefix / 'bin',
            include_dir=prefix / 'include',
            lib_dir=prefix / 'lib',
            libs=tuple(libs),
        )

    def cargo_metadata(self) -> List[str]:
        lines = [f"{LINK_SEARCH_KEY}=native={self.lib_dir}"]
        for lib in self.libs:
            lines.append(f"{LINK_LIB_KEY}=static={lib}")
        lines.append(f"{INCLUDE_KEY}={self.include_dir}")
        lines.append(f"{LIB_KEY}={self.lib_dir}")
        return lines

    def print_cargo_metadata(self):
        """Print link and include metadata for the calling build, one per line."""
        for line in self.cargo_metadata():
            print(line)
