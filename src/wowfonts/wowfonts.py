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

"""Replace World of Warcraft's fonts with your own, or put the defaults back.

The first replacement of each game font copies the original to Fonts/backup.
Restoring deletes the whole Fonts folder so the game falls back to the fonts
built into its data files.

Sample usage:
wowfonts replace --install_dir "C:/Games/World of Warcraft/_retail_" --slots ui,quest MyFont.ttf
wowfonts restore --install_dir "C:/Games/World of Warcraft/_retail_"
wowfonts check --install_dir "C:/Games/World of Warcraft/_classic_"
wowfonts slots
"""
from absl import app
from absl import flags
from absl import logging
from pathlib import Path
from typing import Callable, Mapping, Sequence

from wowfonts import config, errorlog, override, paths, process, restore
from wowfonts.config import ChangerConfig
from wowfonts.errors import (
    RestoreError,
    RestoreInUseError,
    RestoreIOError,
    RestorePermissionError,
    ValidationError,
)
from wowfonts.slots import CANONICAL_FILENAMES, DESCRIPTIONS, FontSlot
from wowfonts.staging import StagingArea


FLAGS = flags.FLAGS


flags.DEFINE_string("config", None, "TOML config file. Flags override its values.")
flags.DEFINE_string(
    "save_config", None, "Write the settings in effect to this TOML file."
)


_RESTORE_MESSAGES = {
    restore.RestoreResult.RESTORED: (
        "Fonts folder deleted. World of Warcraft will use default fonts now."
    ),
    restore.RestoreResult.ALREADY_DEFAULT: (
        "No custom Fonts folder found. The default fonts are already in use."
    ),
}

_RESTORE_ERROR_MESSAGES = {
    RestorePermissionError: (
        "Error: You don't have permission to delete the Fonts folder."
    ),
    RestoreInUseError: (
        "Error: The Fonts folder is in use or locked. "
        "Please make sure World of Warcraft is closed."
    ),
    RestoreIOError: "Error deleting Fonts folder.",
}


def _load_config() -> ChangerConfig:
    config_file = Path(FLAGS.config) if FLAGS.config else None
    changer_config = config.load(config_file)
    if FLAGS.save_config:
        config.write(Path(FLAGS.save_config), changer_config)
        logging.info("Wrote %s", FLAGS.save_config)
    return changer_config


def _warn_if_running(changer_config: ChangerConfig):
    if process.is_game_running(changer_config.process_names):
        logging.warning(
            "World of Warcraft is currently running. "
            "The font changes will take effect after you restart WoW."
        )


def replace_command(changer_config: ChangerConfig, files: Sequence[str]) -> int:
    staging = StagingArea()
    for rejected in staging.drop(files):
        logging.warning(
            "Invalid file type, only .ttf and .otf files are accepted: %s",
            rejected.name,
        )
    if staging.accepted:
        logging.info("Loaded fonts: %s", ", ".join(f.name for f in staging.accepted))

    install_dir = paths.check_install_dir(changer_config.install_dir)
    if not changer_config.slots:
        raise ValidationError("Please select at least one font to replace.")
    _warn_if_running(changer_config)

    source = staging.first_font()
    for ignored in staging.accepted[1:]:
        logging.warning("Only one font is applied per run, ignoring %s", ignored.name)

    try:
        written = override.replace_fonts(install_dir, source, changer_config.slots)
    except OSError as e:
        with errorlog.error_log(changer_config.error_log_file):
            logging.exception("Error replacing fonts: %s", e)
        return 1

    for font_file in written:
        logging.info("Wrote %s", font_file)
    logging.info("Fonts replaced successfully.")
    return 0


def restore_command(changer_config: ChangerConfig, files: Sequence[str]) -> int:
    if files:
        raise app.UsageError(f"restore takes no files, got {' '.join(files)}")

    try:
        result = restore.restore_defaults(changer_config.install_dir)
    except RestoreError as e:
        with errorlog.error_log(changer_config.error_log_file):
            logging.exception("%s %s", _RESTORE_ERROR_MESSAGES[type(e)], e.__cause__)
        return 1

    logging.info(_RESTORE_MESSAGES[result])
    return 0


def check_command(changer_config: ChangerConfig, files: Sequence[str]) -> int:
    install_dir = paths.check_install_dir(changer_config.install_dir)
    if not install_dir.is_dir():
        raise ValidationError(f"{install_dir} is not a directory")
    logging.info("%s is a World of Warcraft folder", install_dir)

    fonts_dir = paths.fonts_dir(install_dir)
    if fonts_dir.is_dir():
        customized = sorted(
            slot.value
            for slot, filename in CANONICAL_FILENAMES.items()
            if (fonts_dir / filename).is_file()
        )
        logging.info("Custom fonts in use: %s", ", ".join(customized) or "none")
    else:
        logging.info("Default fonts in use")

    _warn_if_running(changer_config)
    for font_file in files:
        if not paths.is_font_file(font_file):
            logging.warning("Not a font file: %s", font_file)
    return 0


def slots_command(changer_config: ChangerConfig, files: Sequence[str]) -> int:
    for slot in FontSlot:
        print(f"{slot.value:<8}{CANONICAL_FILENAMES[slot]:<14}{DESCRIPTIONS[slot]}")
    return 0


_COMMANDS: Mapping[str, Callable[[ChangerConfig, Sequence[str]], int]] = {
    "replace": replace_command,
    "restore": restore_command,
    "check": check_command,
    "slots": slots_command,
}


def _run(argv):
    if len(argv) < 2 or argv[1] not in _COMMANDS:
        raise app.UsageError(f"Expected one of {', '.join(_COMMANDS)} as command")
    command, files = argv[1], argv[2:]

    try:
        return _COMMANDS[command](_load_config(), files)
    except ValidationError as e:
        logging.error("%s", e)
        return 1


def main():
    # We don't seem to be __main__ when run as cli tool installed by setuptools
    app.run(_run)


if __name__ == "__main__":
    app.run(_run)
