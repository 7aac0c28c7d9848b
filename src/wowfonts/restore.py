# Copyright 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Put the game back on its own fonts by deleting the custom Fonts folder."""

from absl import logging
import enum
import errno
import os
from pathlib import Path
import shutil
import stat
from typing import Union

from wowfonts import paths
from wowfonts.errors import (
    RestoreError,
    RestoreInUseError,
    RestoreIOError,
    RestorePermissionError,
    ValidationError,
)


# ERROR_SHARING_VIOLATION, ERROR_LOCK_VIOLATION
_WINERROR_IN_USE = frozenset({32, 33})
_ERRNO_IN_USE = frozenset({errno.EBUSY, errno.ETXTBSY})


class RestoreResult(enum.Enum):
    RESTORED = "restored"
    ALREADY_DEFAULT = "already_default"


def clear_read_only(path: Path):
    """Make path and everything below it writable."""
    _make_writable(path)
    for dirpath, dirnames, filenames in os.walk(path):
        for name in dirnames + filenames:
            _make_writable(Path(dirpath) / name)


def _make_writable(path: Path):
    mode = path.lstat().st_mode
    # rmtree unlinks symlinks without following them; leave their targets alone
    if stat.S_ISLNK(mode):
        return
    if not mode & stat.S_IWRITE:
        logging.debug("Clearing read-only on %s", path)
        path.chmod(mode | stat.S_IWRITE)


def _classify(fonts_dir: Path, e: OSError) -> RestoreError:
    if getattr(e, "winerror", None) in _WINERROR_IN_USE or e.errno in _ERRNO_IN_USE:
        return RestoreInUseError(fonts_dir, "Fonts folder is in use or locked")
    if isinstance(e, PermissionError):
        return RestorePermissionError(fonts_dir, "No permission to delete Fonts folder")
    return RestoreIOError(fonts_dir, f"Unable to delete Fonts folder ({e})")


def restore_defaults(install_dir: Union[str, Path]) -> RestoreResult:
    install_dir = paths.check_install_dir(install_dir)
    if not install_dir.is_dir():
        raise ValidationError(f"{install_dir} is not a directory")

    fonts_dir = paths.fonts_dir(install_dir)
    if not fonts_dir.is_dir():
        logging.debug("No %s, nothing to restore", fonts_dir)
        return RestoreResult.ALREADY_DEFAULT

    try:
        clear_read_only(fonts_dir)
        shutil.rmtree(fonts_dir)
    except OSError as e:
        raise _classify(fonts_dir, e) from e
    return RestoreResult.RESTORED
