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

"""Small helper functions."""

import os
from pathlib import Path
import re
import sys
from typing import Union


def abspath(path: Path) -> Path:
    # pathlib.Path.absolute() doesn't do path normalization, whereas Path.resolve()
    # does normalization but also resolves symlinks which sometimes we don't want to
    # so here we use good ol' os.path.abspath.
    return Path(os.path.abspath(path))


def app_dir() -> Path:
    """Directory holding the running executable.

    For a frozen (PyInstaller style) build that is the .exe; otherwise the
    script or console entry point that started us.
    """
    if getattr(sys, "frozen", False):
        return abspath(Path(sys.executable)).parent
    return abspath(Path(sys.argv[0])).parent


def final_segment(path: Union[str, Path]) -> str:
    """Last component of path, accepting both / and \\ as separators.

    Trailing separators are ignored, so "C:\\Games\\_retail_\\" gives "_retail_".
    """
    parts = re.split(r"[\\/]+", str(path).rstrip("\\/"))
    return parts[-1]
