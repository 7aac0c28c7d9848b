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

"""The fonts World of Warcraft lets you override, by what they are used for."""

import enum
from typing import Iterable, Mapping, Tuple

from wowfonts.errors import ValidationError


class FontSlot(enum.Enum):
    UI = "ui"
    NORMAL = "normal"
    HUGE = "huge"
    QUEST = "quest"


# The game only looks for these exact names in <install_dir>/Fonts
CANONICAL_FILENAMES: Mapping[FontSlot, str] = {
    FontSlot.UI: "FRIZQT__.TTF",
    FontSlot.NORMAL: "ARIALN.TTF",
    FontSlot.HUGE: "SKURRI.TTF",
    FontSlot.QUEST: "MORPHEUS.TTF",
}

DESCRIPTIONS: Mapping[FontSlot, str] = {
    FontSlot.UI: (
        "Main UI Font (Friz Quadrata) - Used throughout most of the game "
        "interface, including player names, tooltips, and dialogues."
    ),
    FontSlot.NORMAL: (
        "Normal Numbers Font (Arial Narrow) - Used for chat windows, quest XP "
        "rewards, vendor quantities, and action button numbers."
    ),
    FontSlot.HUGE: (
        "Huge Numbers Font (Skurri) - Appears over player and pet portraits "
        "during combat, showing incoming healing or damage."
    ),
    FontSlot.QUEST: (
        "Quest Log Font (Morpheus) - Used for quest title headers, mail text, "
        "and readable in-game books."
    ),
}


def canonical_filename(slot: FontSlot) -> str:
    return CANONICAL_FILENAMES[slot]


def parse_slot(name: str) -> FontSlot:
    try:
        return FontSlot(name.strip().lower())
    except ValueError:
        choices = ", ".join(s.value for s in FontSlot)
        raise ValidationError(f"Unknown font slot {name!r}, expected one of {choices}")


def parse_slots(names: Iterable[str]) -> Tuple[FontSlot, ...]:
    """Parse slot names, dropping duplicates but keeping the order given."""
    result = []
    for name in names:
        slot = parse_slot(name)
        if slot not in result:
            result.append(slot)
    return tuple(result)
