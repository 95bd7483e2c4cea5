import json
import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "pqview")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
LOG_PATH = os.path.join(CONFIG_DIR, "pqview.log")

# default settings
WINDOW_SIZE_DEFAULT = 32
COLUMN_WIDTH_DEFAULT = 20
TABLE_HEIGHT_DEFAULT = 10
FILE_SUFFIX_DEFAULT = ".parquet"
BATCH_SIZE_DEFAULT = 64
LOG_LEVEL_DEFAULT = "WARNING"

_POSITIVE_INTS = {
    "window_size": "WINDOW_SIZE",
    "column_width": "COLUMN_WIDTH",
    "table_height": "TABLE_HEIGHT",
    "batch_size": "BATCH_SIZE",
}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def ensure_config_dirs():
    try:
        os.makedirs(CONFIG_DIR, exist_ok=True)
    except OSError:
        pass


def load_config():
    cfg = {
        "WINDOW_SIZE": WINDOW_SIZE_DEFAULT,
        "COLUMN_WIDTH": COLUMN_WIDTH_DEFAULT,
        "TABLE_HEIGHT": TABLE_HEIGHT_DEFAULT,
        "FILE_SUFFIX": FILE_SUFFIX_DEFAULT,
        "BATCH_SIZE": BATCH_SIZE_DEFAULT,
        "LOG_LEVEL": LOG_LEVEL_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return cfg
    if not isinstance(data, dict):
        return cfg

    for key, name in _POSITIVE_INTS.items():
        value = data.get(key)
        # bool is an int subclass; reject it explicitly
        if isinstance(value, int) and not isinstance(value, bool) and value >= 1:
            cfg[name] = value

    suffix = data.get("file_suffix")
    if isinstance(suffix, str) and suffix.strip():
        cfg["FILE_SUFFIX"] = suffix.strip()

    level = data.get("log_level")
    if isinstance(level, str) and level.upper() in _LOG_LEVELS:
        cfg["LOG_LEVEL"] = level.upper()

    return cfg
