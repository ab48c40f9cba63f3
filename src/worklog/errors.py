# SPDX-License-Identifier: MIT


class WorklogError(Exception):
    """Base class for failures reported by worklog collaborators."""

    pass


class EntryFieldError(WorklogError):
    """Raised when an entry field name is not a settable scalar field."""

    pass


class JournalError(WorklogError):
    """Raised when the journal store cannot be read or written."""

    pass


class CatalogError(WorklogError):
    """Raised for unknown ids or duplicate names in the project/tag catalog."""

    pass


class TicketSourceError(WorklogError):
    """Raised when the candidate ticket source cannot produce a pool."""

    pass


class ReportRangeError(WorklogError):
    """Raised when a report period starts after it ends."""

    pass
