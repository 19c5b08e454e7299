"""
Recursive source tree copying for nativebuild.

Used to move a read-only or shared checkout into a writable build
location before the pipeline starts modifying it.
"""

import os
import shutil
from pathlib import Path
from typing import Union

from .config import VCS_METADATA_DIR


def copy_tree(src: Union[str, Path], dst: Union[str, Path]) -> None:
    """Copy the contents of ``src`` into ``dst``, skipping git metadata.

    ``dst`` and its parents are created when missing. Files already present
    in ``dst`` are replaced. Any OSError aborts the copy as-is; whatever was
    copied before the failure is left in place.
    """
    src = Path(src)
    dst = Path(dst)
    dst.mkdir(parents=True, exist_ok=True)

    with os.scandir(src) as entries:
        for entry in entries:
            # Git metadata has caused permission and symlink trouble in
            # build sandboxes and is never needed to build
            if entry.name == VCS_METADATA_DIR:
                continue

            target = dst / entry.name
            if entry.is_dir(follow_symlinks=False):
                target.mkdir(parents=True, exist_ok=True)
                copy_tree(entry.path, target)
            else:
                target.unlink(missing_ok=True)
                shutil.copy(entry.path, target)
