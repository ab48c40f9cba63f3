# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from worklog import configuration


def get_default_config() -> configuration.Configuration:
    return {
        "show_header": True,
        "data_path": None,
        "default_entry_type": configuration.DEFAULT_ENTRY_TYPES[0],
        "entry_types": list(configuration.DEFAULT_ENTRY_TYPES),
        "jql_query": None,
        "ticket_source_path": None,
        "log_level": "warning",
        "tag_emphasis_base": 10,
        "tag_emphasis_per_unit": 2,
        "tag_emphasis_max": 16,
    }


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
        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if self._config is None:
            raise ValueError()

        # Migration: fill in any field missing from older config files
        for key, value in get_default_config().items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def reset(self) -> None:
        """Drop cached state so the next access reads from disk."""
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        show_header: Optional[bool] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        default_entry_type: Optional[str] = None,
        entry_types: Optional[list[str]] = None,
        jql_query: Optional[str] = None,
        remove_jql_query: bool = False,
        ticket_source_path: Optional[str] = None,
        remove_ticket_source_path: bool = False,
        log_level: Optional[str] = None,
        tag_emphasis_base: Optional[int] = None,
        tag_emphasis_per_unit: Optional[int] = None,
        tag_emphasis_max: Optional[int] = None,
    ) -> None:
        self.is_dirty = True

        if show_header is not None:
            self.config["show_header"] = show_header
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if default_entry_type is not None:
            self.config["default_entry_type"] = default_entry_type
        if entry_types is not None:
            self.config["entry_types"] = list(dict.fromkeys(entry_types))
        if jql_query is not None:
            self.config["jql_query"] = jql_query
        if remove_jql_query:
            self.config["jql_query"] = None
        if ticket_source_path is not None:
            self.config["ticket_source_path"] = ticket_source_path
        if remove_ticket_source_path:
            self.config["ticket_source_path"] = None
        if log_level is not None:
            self.config["log_level"] = log_level
        if tag_emphasis_base is not None:
            self.config["tag_emphasis_base"] = tag_emphasis_base
        if tag_emphasis_per_unit is not None:
            self.config["tag_emphasis_per_unit"] = tag_emphasis_per_unit
        if tag_emphasis_max is not None:
            self.config["tag_emphasis_max"] = tag_emphasis_max


CONFIGURATION_REPO = ConfigurationRepository()
