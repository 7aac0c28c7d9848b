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

from absl import flags
import importlib.resources as resources
from pathlib import Path
import toml
from typing import Any, MutableMapping, NamedTuple, Optional, Tuple

from wowfonts import slots as font_slots
from wowfonts import util
from wowfonts.errors import ValidationError
from wowfonts.slots import FontSlot


FLAGS = flags.FLAGS


_DEFAULT_CONFIG_FILE = "_default.toml"


# we use None as a sentinel for flag not set; ChangerConfig class has the actual defaults.
# CLI flags override config file (which overrides default ChangerConfig).
flags.DEFINE_string(
    "install_dir",
    None,
    "World of Warcraft game folder, the one named _retail_, _ptr_, _classic_ or _beta_.",
)
flags.DEFINE_list(
    "slots",
    None,
    "Fonts to replace, any of: " + ", ".join(s.value for s in FontSlot) + ".",
)
flags.DEFINE_string(
    "error_log",
    None,
    "File failures are appended to. Relative to the executable's directory.",
)
flags.DEFINE_list(
    "process_names",
    None,
    "Executable names of the game client, used to warn when it is running.",
)


class ChangerConfig(NamedTuple):
    install_dir: str = ""
    slots: Tuple[FontSlot, ...] = ()
    error_log: str = "ErrorLog.txt"
    process_names: Tuple[str, ...] = ("Wow", "WowClassic", "WowT", "WowB")

    @property
    def error_log_file(self) -> Path:
        log_file = Path(self.error_log)
        if log_file.is_absolute():
            return log_file
        return util.app_dir() / log_file

    def validate(self):
        if not self.process_names:
            raise ValidationError("'process_names' must name at least one executable")
        if any(not name.strip() for name in self.process_names):
            raise ValidationError("'process_names' must not contain blank names")
        if not self.error_log.strip():
            raise ValidationError("'error_log' must not be blank")
        return self


def write(dest: Path, config: ChangerConfig):
    toml_cfg = {
        "install_dir": config.install_dir,
        "slots": [s.value for s in config.slots],
        "error_log": config.error_log,
        "process_names": list(config.process_names),
    }
    dest.write_text(toml.dumps(toml_cfg))


def _resolve_config(config_file: Optional[Path] = None) -> MutableMapping[str, Any]:
    if config_file is None:
        default_file = resources.files("wowfonts") / "data" / _DEFAULT_CONFIG_FILE
        return toml.loads(default_file.read_text())
    return toml.load(config_file)


_DEFAULT_CONFIG = ChangerConfig()


def _pop_flag(config: MutableMapping[str, Any], name: str) -> Any:
    config_value = config.pop(name, None)
    flag_value = getattr(FLAGS, name)
    if config_value is None and flag_value is None:
        return getattr(_DEFAULT_CONFIG, name)
    return flag_value if flag_value is not None else config_value


def load(config_file: Optional[Path] = None) -> ChangerConfig:
    config = _resolve_config(config_file)

    # CLI flags will take precedence over the config file
    install_dir = str(_pop_flag(config, "install_dir"))
    slots = font_slots.parse_slots(
        s.value if isinstance(s, FontSlot) else s
        for s in _pop_flag(config, "slots")
    )
    error_log = str(_pop_flag(config, "error_log"))
    process_names = tuple(str(n) for n in _pop_flag(config, "process_names"))

    if config:
        raise ValidationError(f"Unexpected config: {config}")

    return ChangerConfig(
        install_dir=install_dir,
        slots=slots,
        error_log=error_log,
        process_names=process_names,
    ).validate()
