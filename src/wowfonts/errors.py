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

"""Exceptions raised by wowfonts operations."""

from pathlib import Path


class WowFontsError(Exception):
    pass


class ValidationError(WowFontsError, ValueError):
    """Bad user input; raised before anything on disk is touched."""


class RestoreError(WowFontsError):
    """Deleting the custom Fonts folder failed.

    The underlying OSError is chained as __cause__.
    """

    def __init__(self, fonts_dir: Path, reason: str):
        super().__init__(f"{reason}: {fonts_dir}")
        self.fonts_dir = fonts_dir
        self.reason = reason


class RestorePermissionError(RestoreError):
    pass


class RestoreInUseError(RestoreError):
    pass


class RestoreIOError(RestoreError):
    pass
