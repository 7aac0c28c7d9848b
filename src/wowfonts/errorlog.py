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

"""Append failures, with their traceback, to a log file next to the executable.

The file only ever grows; nothing here rotates or truncates it.
"""

from absl import logging
import contextlib
import logging as std_logging
from pathlib import Path


_FORMAT = "%(asctime)s: %(message)s"


@contextlib.contextmanager
def error_log(log_file: Path):
    """Copies ERROR and above logged through absl to log_file while active."""
    handler = std_logging.FileHandler(log_file, mode="a", encoding="utf-8", delay=True)
    handler.setLevel(std_logging.ERROR)
    handler.setFormatter(std_logging.Formatter(_FORMAT))
    absl_logger = logging.get_absl_logger()
    absl_logger.addHandler(handler)
    try:
        yield handler
    finally:
        absl_logger.removeHandler(handler)
        handler.close()
