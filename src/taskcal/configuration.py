# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Literal, NotRequired, Optional, TypedDict

from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

from taskcal.errors import ConfigurationError

APP_NAME = "taskcal"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"
LOG_PATH: Path = platformdirs.user_log_path(APP_NAME)

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_TASKS_PATH: Path = DATA_PATH / "tasks.yaml"
DATA_CURSOR_PATH: Path = DATA_PATH / "cursor.yaml"

DEFAULT_MAX_TASKS_PER_CELL = 3
DEFAULT_FIRST_HOUR = 8
DEFAULT_LAST_HOUR = 23


class Configuration(TypedDict):
    show_header: bool
    data_path: Optional[str]
    default_mode: Literal["month", "week"]
    cell_width: int
    day_width: int
    max_tasks_per_cell: int
    first_hour: int
    last_hour: int
    log_level: NotRequired[str]


def get_default_configuration() -> Configuration:
    return {
        "show_header": True,
        "data_path": None,
        "default_mode": "month",
        "cell_width": 18,
        "day_width": 16,
        "max_tasks_per_cell": DEFAULT_MAX_TASKS_PER_CELL,
        "first_hour": DEFAULT_FIRST_HOUR,
        "last_hour": DEFAULT_LAST_HOUR,
        "log_level": "WARNING",
    }


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are used.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    try:
        config: Optional[Configuration] = load(
            APP_CONFIG_PATH.read_text(), Loader=Loader
        )
    except YAMLError as e:
        raise ConfigurationError(f"Invalid configuration file: {e}") from e
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_TASKS_PATH, DATA_CURSOR_PATH

    DATA_PATH = data_path
    DATA_TASKS_PATH = DATA_PATH / "tasks.yaml"
    DATA_CURSOR_PATH = DATA_PATH / "cursor.yaml"
