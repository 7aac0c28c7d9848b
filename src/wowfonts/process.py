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

"""Is the game running? Changes only show up after a restart if it is."""

from absl import logging
import psutil
from typing import Iterable


def _normalize(name: str) -> str:
    name = name.lower()
    if name.endswith(".exe"):
        name = name[: -len(".exe")]
    return name


def is_game_running(process_names: Iterable[str]) -> bool:
    wanted = {_normalize(n) for n in process_names}
    for proc in psutil.process_iter(["name"]):
        name = proc.info.get("name")
        if name and _normalize(name) in wanted:
            logging.debug("Found %s (pid %d)", name, proc.pid)
            return True
    return False
