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

"""Copy a user font over the game's fonts, keeping the originals.

The first time a canonical file is replaced the original is copied to
Fonts/backup. Later replacements never touch the backup, so it always holds
the file the game shipped with.
"""

from absl import logging
from pathlib import Path
import shutil
from typing import Iterable, Tuple

from wowfonts import paths
from wowfonts.errors import ValidationError
from wowfonts.slots import FontSlot, canonical_filename


def backup_and_replace(
    fonts_dir: Path, backup_dir: Path, filename: str, source: Path
) -> Path:
    target = fonts_dir / filename
    backup = backup_dir / filename

    if not backup.exists() and target.is_file():
        logging.debug("Backing up %s to %s", target, backup)
        shutil.copy2(target, backup)

    logging.debug("Copying %s to %s", source, target)
    shutil.copyfile(source, target)
    return target


def replace_fonts(
    install_dir: Path, source: Path, slots: Iterable[FontSlot]
) -> Tuple[Path, ...]:
    """Writes source into the file for every slot, returns the files written.

    Filesystem errors propagate; slots handled before the failure stay replaced.
    """
    slots = tuple(slots)
    if not slots:
        raise ValidationError("Please select at least one font to replace.")
    if not paths.is_font_file(source):
        raise ValidationError(f"Skipping non-font file: {source.name}")

    fonts_dir = paths.fonts_dir(install_dir)
    backup_dir = paths.backup_dir(install_dir)
    fonts_dir.mkdir(parents=True, exist_ok=True)
    backup_dir.mkdir(parents=True, exist_ok=True)

    return tuple(
        backup_and_replace(fonts_dir, backup_dir, canonical_filename(slot), source)
        for slot in slots
    )
