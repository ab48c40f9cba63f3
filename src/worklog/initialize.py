# SPDX-License-Identifier: MIT

from typing import Any

from yaml import dump

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from worklog import configuration, time
from worklog.logger import configure_logging
from worklog.repository.configuration import CONFIGURATION_REPO, get_default_config
from worklog.template.catalog import (
    DEFAULT_PROJECTS,
    DEFAULT_TAGS,
    get_default_catalog,
)
from worklog.view import state as view_state


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_files()

    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_data_files()

    config = CONFIGURATION_REPO.get_config()
    configure_logging(config["log_level"])
    view_state.set_show_header(config["show_header"])


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.touch()
        config: configuration.Configuration = get_default_config()
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))


def __serializable_catalog(defaults: list[tuple[str, str, str]]) -> list[dict[str, Any]]:
    items: list[dict[str, Any]] = []
    for item in get_default_catalog(defaults):
        serializable_item: dict[str, Any] = dict(item)
        serializable_item["created"] = time.datetime_to_iso_str(item["created"])
        serializable_item["updated"] = time.datetime_to_iso_str(item["updated"])
        items.append(serializable_item)
    return items


def __ensure_data_files() -> None:
    # Catalogs start out with the default projects and tags
    if not configuration.DATA_PROJECTS_PATH.is_file():
        configuration.DATA_PROJECTS_PATH.touch()
        projects: dict[str, Any] = {
            "projects": __serializable_catalog(DEFAULT_PROJECTS)
        }
        configuration.DATA_PROJECTS_PATH.write_text(
            dump(projects, Dumper=Dumper, allow_unicode=True)
        )
    if not configuration.DATA_TAGS_PATH.is_file():
        configuration.DATA_TAGS_PATH.touch()
        tags: dict[str, Any] = {"tags": __serializable_catalog(DEFAULT_TAGS)}
        configuration.DATA_TAGS_PATH.write_text(
            dump(tags, Dumper=Dumper, allow_unicode=True)
        )

    # One file per journal day
    if not configuration.DATA_JOURNAL_DIR.is_dir():
        configuration.DATA_JOURNAL_DIR.mkdir(parents=True, exist_ok=True)
        (configuration.DATA_JOURNAL_DIR / ".gitkeep").touch()
