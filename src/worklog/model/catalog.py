# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

import pendulum

CatalogKind = Literal["projects", "tags"]


class CatalogItem(TypedDict):
    id: int
    name: str
    description: Optional[str]
    color: str
    active: bool
    created: pendulum.DateTime
    updated: pendulum.DateTime


# Projects and tags share one record shape
Project = CatalogItem
Tag = CatalogItem
