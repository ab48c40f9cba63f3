# SPDX-License-Identifier: MIT

import atexit

from worklog.repository.catalog import PROJECT_REPO, TAG_REPO
from worklog.repository.configuration import CONFIGURATION_REPO
from worklog.repository.journal import JOURNAL_REPO
from worklog.repository.ticket import TICKET_REPO


def flush_all() -> None:
    CONFIGURATION_REPO.flush()
    JOURNAL_REPO.flush()
    TICKET_REPO.flush()
    PROJECT_REPO.flush()
    TAG_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush_all)
