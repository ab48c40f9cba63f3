# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import NotRequired, Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "worklog"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_JOURNAL_DIR: Path = DATA_PATH / "journal"
DATA_PROJECTS_PATH: Path = DATA_PATH / "projects.yaml"
DATA_TAGS_PATH: Path = DATA_PATH / "tags.yaml"
DATA_TICKETS_PATH: Path = DATA_PATH / "tickets.yaml"

DEFAULT_ENTRY_TYPES = [
    "development",
    "code review",
    "meeting",
    "debug",
    "documentation",
    "training",
    "technology watch",
]


class Configuration(TypedDict):
    show_header: bool
    data_path: Optional[str]
    default_entry_type: str
    entry_types: list[str]
    jql_query: Optional[str]
    ticket_source_path: Optional[str]
    log_level: str
    tag_emphasis_base: NotRequired[int]
    tag_emphasis_per_unit: NotRequired[int]
    tag_emphasis_max: NotRequired[int]


def set_data_path(data_path: Path) -> None:
    """Point every data file path at ``data_path``."""
    global DATA_PATH, DATA_JOURNAL_DIR, DATA_PROJECTS_PATH, DATA_TAGS_PATH
    global DATA_TICKETS_PATH

    DATA_PATH = data_path
    DATA_JOURNAL_DIR = DATA_PATH / "journal"
    DATA_PROJECTS_PATH = DATA_PATH / "projects.yaml"
    DATA_TAGS_PATH = DATA_PATH / "tags.yaml"
    DATA_TICKETS_PATH = DATA_PATH / "tickets.yaml"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are read.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))
