# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from worklog import configuration, time
from worklog.model.ticket import PoolTicket, TicketPool


def get_empty_pool() -> TicketPool:
    return {"query": None, "fetched": None, "tickets": []}


class TicketRepository:
    """The most recently resolved candidate pool, kept between invocations."""

    def __init__(self) -> None:
        self._pool: Optional[TicketPool] = None
        self.is_dirty = False

    @property
    def pool(self) -> TicketPool:
        if self._pool is None:
            self.__load_data()
        if self._pool is None:
            raise ValueError()
        return self._pool

    def __load_data(self) -> None:
        if not configuration.DATA_TICKETS_PATH.is_file():
            self._pool = get_empty_pool()
            return
        pool_data = load(configuration.DATA_TICKETS_PATH.read_text(), Loader=Loader)
        self._pool = get_empty_pool()
        if pool_data is not None:
            self._pool.update(pool_data)

    def __save_data(self, pool: TicketPool) -> None:
        configuration.DATA_TICKETS_PATH.write_text(
            dump(pool, Dumper=Dumper, allow_unicode=True)
        )

    def flush(self) -> None:
        if self._pool is not None and self.is_dirty:
            self.__save_data(self._pool)
            self.is_dirty = False

    def reset(self) -> None:
        self._pool = None
        self.is_dirty = False

    def get_tickets(self) -> list[PoolTicket]:
        return deepcopy(self.pool["tickets"])

    def get_query(self) -> Optional[str]:
        return self.pool["query"]

    def get_fetched(self) -> Optional[str]:
        return self.pool["fetched"]

    def set_pool(self, query: Optional[str], tickets: list[PoolTicket]) -> None:
        self.is_dirty = True
        self._pool = {
            "query": query,
            "fetched": time.datetime_to_iso_str(time.now_utc()),
            "tickets": deepcopy(tickets),
        }


TICKET_REPO = TicketRepository()
