"""Shared fixtures: an isolated config and data directory per test."""

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from worklog import configuration
from worklog.initialize import initialize
from worklog.repository.catalog import PROJECT_REPO, TAG_REPO
from worklog.repository.configuration import CONFIGURATION_REPO
from worklog.repository.journal import JOURNAL_REPO
from worklog.repository.ticket import TICKET_REPO
from worklog.view import state as view_state

REPOSITORIES = [CONFIGURATION_REPO, JOURNAL_REPO, TICKET_REPO, PROJECT_REPO, TAG_REPO]


def reset_repositories() -> None:
    """Drop every cached repository so the next access reads from disk."""
    for repository in REPOSITORIES:
        repository.reset()


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point configuration and data at ``tmp_path`` and seed the default files."""
    config_path = tmp_path / "config"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    for name in (
        "DATA_PATH",
        "DATA_JOURNAL_DIR",
        "DATA_PROJECTS_PATH",
        "DATA_TAGS_PATH",
        "DATA_TICKETS_PATH",
    ):
        monkeypatch.setattr(configuration, name, getattr(configuration, name))
    configuration.set_data_path(tmp_path / "data")

    reset_repositories()
    initialize()
    view_state.set_show_header(False)

    yield tmp_path / "data"

    reset_repositories()


@pytest.fixture
def reload_repositories() -> Callable[[], None]:
    """Callable that forces every repository to re-read its files."""
    return reset_repositories
