import os
import stat
from pathlib import Path
from typing import Dict, List, NamedTuple, Optional

import pytest

from nativebuild import config, utils


class Call(NamedTuple):
    cmd: List[str]
    cwd: Path
    env: Optional[Dict[str, str]]


class _FakeProcess:
    def __init__(self, returncode: int):
        self.returncode = returncode

    def wait(self):
        return self.returncode


class PopenRecorder:
    """Stands in for subprocess.Popen and records every command started.

    Commands are matched by their space-joined command line.
    """

    def __init__(self):
        self.calls: List[Call] = []
        self.exit_codes: Dict[str, int] = {}
        self.missing = set()

    def __call__(self, cmd, cwd=None, env=None):
        self.calls.append(Call(list(cmd), Path(cwd), env))
        line = ' '.join(cmd)
        if line in self.missing:
            raise FileNotFoundError(2, 'No such file or directory', cmd[0])
        return _FakeProcess(self.exit_codes.get(line, 0))

    @property
    def commands(self) -> List[str]:
        return [' '.join(call.cmd) for call in self.calls]


@pytest.fixture
def popen(monkeypatch) -> PopenRecorder:
    recorder = PopenRecorder()
    monkeypatch.setattr(utils.subprocess, 'Popen', recorder)
    monkeypatch.setattr(config, 'MAKE_JOBS', 4)
    return recorder


@pytest.fixture
def source_tree(tmp_path) -> Path:
    """A small autotools-looking checkout with git metadata."""
    src = tmp_path / 'src' / 'foo'
    (src / '.git' / 'objects').mkdir(parents=True)
    (src / '.git' / 'HEAD').write_text('ref: refs/heads/main\n')
    (src / 'README').write_bytes(b'foo library\n')
    (src / 'configure.ac').write_text('AC_INIT([foo], [1.0])\n')
    (src / 'lib').mkdir()
    (src / 'lib' / 'foo.c').write_text('int foo(void) { return 1; }\n')
    (src / 'lib' / 'include').mkdir()
    (src / 'lib' / 'include' / 'foo.h').write_text('int foo(void);\n')
    return src


def write_script(path: Path, body: str) -> Path:
    path.write_text('#!/bin/sh\n' + body)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


def tree_files(root: Path) -> Dict[str, bytes]:
    """Map of relative path to contents for every file under root."""
    files = {}
    for dirpath, _, filenames in os.walk(root):
        for name in filenames:
            full = Path(dirpath) / name
            files[full.relative_to(root).as_posix()] = full.read_bytes()
    return files


posix_only = pytest.mark.skipif(os.name != 'posix', reason='needs /bin/sh')
