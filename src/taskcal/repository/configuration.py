# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from taskcal import configuration
from taskcal.errors import ConfigurationError


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        try:
            config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
        except YAMLError as e:
            raise ConfigurationError(f"Invalid configuration file: {e}") from e

        if config is None:
            self._config = configuration.get_default_configuration()
            return
        if not isinstance(config, dict):
            raise ConfigurationError(
                f"Configuration in {configuration.APP_CONFIG_PATH} must be a mapping"
            )

        # Migration: back-fill settings added after the file was written
        for key, value in configuration.get_default_configuration().items():
            if key not in config:
                config[key] = value

        _validate_limits(
            config["first_hour"], config["last_hour"], config["max_tasks_per_cell"]
        )
        self._config = config  # type: ignore[assignment]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        show_header: Optional[bool] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        default_mode: Optional[str] = None,
        cell_width: Optional[int] = None,
        day_width: Optional[int] = None,
        max_tasks_per_cell: Optional[int] = None,
        first_hour: Optional[int] = None,
        last_hour: Optional[int] = None,
        log_level: Optional[str] = None,
    ) -> None:
        _validate_limits(
            first_hour if first_hour is not None else self.config["first_hour"],
            last_hour if last_hour is not None else self.config["last_hour"],
            max_tasks_per_cell
            if max_tasks_per_cell is not None
            else self.config["max_tasks_per_cell"],
        )

        self.is_dirty = True

        if show_header is not None:
            self.config["show_header"] = show_header
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if default_mode is not None:
            self.config["default_mode"] = default_mode  # type: ignore[typeddict-item]
        if cell_width is not None:
            self.config["cell_width"] = cell_width
        if day_width is not None:
            self.config["day_width"] = day_width
        if max_tasks_per_cell is not None:
            self.config["max_tasks_per_cell"] = max_tasks_per_cell
        if first_hour is not None:
            self.config["first_hour"] = first_hour
        if last_hour is not None:
            self.config["last_hour"] = last_hour
        if log_level is not None:
            self.config["log_level"] = log_level.upper()


def _validate_limits(first_hour: Any, last_hour: Any, max_tasks_per_cell: Any) -> None:
    if not all(
        isinstance(value, int) and not isinstance(value, bool)
        for value in (first_hour, last_hour, max_tasks_per_cell)
    ):
        raise ConfigurationError(
            "first_hour, last_hour and max_tasks_per_cell must be integers"
        )
    if not 0 <= first_hour <= last_hour <= 23:
        raise ConfigurationError(
            f"Hour range must satisfy 0 <= first <= last <= 23, got {first_hour}-{last_hour}"
        )
    if max_tasks_per_cell < 1:
        raise ConfigurationError("max_tasks_per_cell must be at least 1")


CONFIGURATION_REPO = ConfigurationRepository()
