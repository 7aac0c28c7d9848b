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

"""Where things live inside a World of Warcraft install, and what input we accept."""

from pathlib import Path
from typing import FrozenSet, Union

from wowfonts import util
from wowfonts.errors import ValidationError


# Final path segment of each game flavor's folder, lowercase
ACCEPTED_INSTALL_DIRS: FrozenSet[str] = frozenset(
    {"_retail_", "_ptr_", "_classic_", "_beta_"}
)
ACCEPTED_FONT_EXTENSIONS: FrozenSet[str] = frozenset({".ttf", ".otf"})

FONTS_DIR_NAME = "Fonts"
BACKUP_DIR_NAME = "backup"


def is_install_dir(path: Union[str, Path]) -> bool:
    if not str(path).strip():
        return False
    return util.final_segment(path).lower() in ACCEPTED_INSTALL_DIRS


def is_font_file(path: Union[str, Path]) -> bool:
    return Path(util.final_segment(path)).suffix.lower() in ACCEPTED_FONT_EXTENSIONS


def fonts_dir(install_dir: Path) -> Path:
    return install_dir / FONTS_DIR_NAME


def backup_dir(install_dir: Path) -> Path:
    return fonts_dir(install_dir) / BACKUP_DIR_NAME


def describe_accepted_install_dirs() -> str:
    names = sorted(ACCEPTED_INSTALL_DIRS)
    return ", ".join(names[:-1]) + f", or {names[-1]}"


def check_install_dir(install_dir: Union[str, Path]) -> Path:
    if not str(install_dir).strip():
        raise ValidationError(
            "Please select a valid World of Warcraft installation folder."
        )
    if not is_install_dir(install_dir):
        raise ValidationError(
            "Please select a valid World of Warcraft folder "
            f"({describe_accepted_install_dirs()})."
        )
    return Path(install_dir)
