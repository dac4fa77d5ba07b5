# config_manager.py
import os
from pathlib import Path
from dataclasses import dataclass, fields, replace
import json

config_json = Path(__file__).resolve().parent.parent / "config.json"

DEFAULT_SETTINGS = {
    "quiet": False,
    "color": True,
    "copy_to_clipboard": False,
    "keep_going": False,
    "debug": False,
}


@dataclass(frozen=True)
class Settings:
    """Presentation and run settings. Built once per run, then only read."""
    quiet: bool = False
    color: bool = True
    copy_to_clipboard: bool = False
    keep_going: bool = False
    debug: bool = False


def config_path():
    override = os.environ.get("POW_CONFIG")
    if override:
        return Path(override)
    return config_json


def load_setting_value(key_value):
    try:
        with open(config_path(), 'r', encoding= 'utf-8') as f:
            settings_dict = json.load(f)

    except (FileNotFoundError, json.JSONDecodeError):
        settings_dict = {}

    if not isinstance(settings_dict, dict):
        settings_dict = {}

    if key_value == "all":
        return {**DEFAULT_SETTINGS, **settings_dict}

    else:
        return settings_dict.get(key_value, DEFAULT_SETTINGS.get(key_value, 0))


def save_setting(settings_dict):
    try:
        with open (config_path(), 'w', encoding= 'utf-8') as f:
            json.dump(settings_dict, f, indent=4)
            return settings_dict

    except (FileNotFoundError, PermissionError):
        return{}


def boolean(value):
    """""

    Check whether a config value is a boolean or one of the strings "true" / "false".

    Returns True or False, or -1 if its neither.

    """""

    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        if value.strip().lower() == "true":
            return True
        elif value.strip().lower() == "false":
            return False
    return -1


def load_settings(**overrides):
    """Merge config.json with command line overrides into a frozen Settings.

    Overrides set to None are ignored, so unset flags keep the file value.
    Values that are not booleans fall back to the default.
    """
    all_settings = load_setting_value("all")
    known = {field.name for field in fields(Settings)}

    values = {}
    for key, value in all_settings.items():
        if key not in known:
            continue
        parsed = boolean(value)
        values[key] = DEFAULT_SETTINGS[key] if parsed == -1 else parsed
    settings = Settings(**values)

    changes = {key: value for key, value in overrides.items() if value is not None}
    return replace(settings, **changes)
