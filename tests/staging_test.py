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

from pathlib import Path

from wowfonts.errors import ValidationError
from wowfonts.staging import StagingArea

import pytest


def test_drop_reports_non_fonts():
    staging = StagingArea()
    rejected = staging.drop(["a.ttf", "notes.txt", "b.OTF", "c.woff"])

    assert rejected == (Path("notes.txt"), Path("c.woff"))
    assert staging.accepted == (Path("a.ttf"), Path("b.OTF"))
    assert len(staging) == 4


def test_last_drop_wins():
    staging = StagingArea()
    staging.drop(["first.ttf", "second.ttf"])
    staging.drop(["third.otf"])

    assert staging.files == (Path("third.otf"),)
    assert staging.first_font() == Path("third.otf")


def test_first_valid_font_is_applied():
    staging = StagingArea()
    staging.drop(["readme.txt", "Bold.ttf", "Regular.ttf"])
    assert staging.first_font() == Path("Bold.ttf")


def test_nothing_staged():
    with pytest.raises(ValidationError, match="No font files were added"):
        StagingArea().first_font()


def test_empty_drop_clears_staging():
    staging = StagingArea()
    staging.drop(["a.ttf"])
    staging.drop([])
    with pytest.raises(ValidationError, match="No font files were added"):
        staging.first_font()


def test_only_non_fonts_staged():
    staging = StagingArea()
    staging.drop(["a.png", "b.zip"])
    with pytest.raises(ValidationError, match="No valid font files loaded"):
        staging.first_font()
