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

"""Font files waiting to be applied.

Every drop replaces what was staged before; files from separate drops are
never merged.
"""

from pathlib import Path
from typing import Iterable, Tuple, Union

from wowfonts import paths
from wowfonts.errors import ValidationError


class StagingArea:
    def __init__(self):
        self._files: Tuple[Path, ...] = ()

    @property
    def files(self) -> Tuple[Path, ...]:
        return self._files

    @property
    def accepted(self) -> Tuple[Path, ...]:
        return tuple(f for f in self._files if paths.is_font_file(f))

    def drop(self, files: Iterable[Union[str, Path]]) -> Tuple[Path, ...]:
        """Stage files, returns the ones that are not fonts."""
        self._files = tuple(Path(f) for f in files)
        return tuple(f for f in self._files if not paths.is_font_file(f))

    def first_font(self) -> Path:
        if not self._files:
            raise ValidationError(
                "No font files were added. Please add font files before replacing."
            )
        accepted = self.accepted
        if not accepted:
            raise ValidationError(
                "No valid font files loaded. Only .ttf and .otf files are accepted."
            )
        return accepted[0]

    def __len__(self):
        return len(self._files)
