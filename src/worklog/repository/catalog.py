# SPDX-License-Identifier: MIT

from copy import deepcopy
from pathlib import Path
from typing import Any, Callable, Optional, cast

import structlog
from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from worklog import configuration, time
from worklog.errors import CatalogError
from worklog.model.catalog import CatalogItem, CatalogKind
from worklog.template.catalog import (
    DEFAULT_PROJECT_COLOR,
    DEFAULT_TAG_COLOR,
    get_catalog_item_template,
)

logger = structlog.get_logger()


class CatalogRepository:
    """Named, colored records that can be deactivated without being deleted."""

    def __init__(
        self,
        kind: CatalogKind,
        path_getter: Callable[[], Path],
        default_color: str,
    ) -> None:
        self.kind = kind
        self._path_getter = path_getter
        self.default_color = default_color
        self._items: Optional[list[CatalogItem]] = None
        self.is_dirty = False

    @property
    def items(self) -> list[CatalogItem]:
        if self._items is None:
            self.__load_data()
        if self._items is None:
            raise ValueError()
        return self._items

    def __load_data(self) -> None:
        catalog_data = load(self._path_getter().read_text(), Loader=Loader)
        raw_items = (catalog_data or {}).get(self.kind) or []
        self._items = [
            self.__convert_item_for_deserialization(raw_item) for raw_item in raw_items
        ]

    def __save_data(self, items: list[CatalogItem]) -> None:
        catalog_data = {
            self.kind: [
                self.__convert_item_for_serialization(deepcopy(item)) for item in items
            ]
        }
        self._path_getter().write_text(
            dump(catalog_data, Dumper=Dumper, allow_unicode=True)
        )

    def flush(self) -> None:
        if self._items is not None and self.is_dirty:
            self.__save_data(self._items)
            self.is_dirty = False

    def reset(self) -> None:
        self._items = None
        self.is_dirty = False

    def __convert_item_for_serialization(self, item: CatalogItem) -> dict[str, Any]:
        serializable_item = cast(dict[str, Any], item)
        serializable_item["created"] = time.datetime_to_iso_str(
            serializable_item["created"]
        )
        serializable_item["updated"] = time.datetime_to_iso_str(
            serializable_item["updated"]
        )
        return serializable_item

    def __convert_item_for_deserialization(self, item: dict[str, Any]) -> CatalogItem:
        deserializable_item = item
        deserializable_item["created"] = time.datetime_from_str(
            deserializable_item["created"]
        )
        deserializable_item["updated"] = time.datetime_from_str(
            deserializable_item["updated"]
        )
        deserializable_item.setdefault("description", None)
        deserializable_item.setdefault("color", self.default_color)
        deserializable_item.setdefault("active", True)
        return cast(CatalogItem, deserializable_item)

    def __find(self, id: int) -> CatalogItem:
        for item in self.items:
            if item["id"] == id:
                return item
        raise CatalogError(f"No {self.kind[:-1]} with id {id}")

    def __check_unique_name(self, name: str, exclude_id: Optional[int] = None) -> None:
        for item in self.items:
            if item["name"] == name and item["id"] != exclude_id:
                raise CatalogError(f"A {self.kind[:-1]} named '{name}' already exists")

    def list_items(self, include_inactive: bool = False) -> list[CatalogItem]:
        return deepcopy(
            [item for item in self.items if include_inactive or item["active"]]
        )

    def get_names(self, include_inactive: bool = False) -> list[str]:
        return [item["name"] for item in self.list_items(include_inactive)]

    def get_item(self, id: int) -> CatalogItem:
        return deepcopy(self.__find(id))

    def create_item(
        self,
        name: str,
        description: Optional[str] = None,
        color: Optional[str] = None,
    ) -> CatalogItem:
        name = name.strip()
        if not name:
            raise CatalogError(f"A {self.kind[:-1]} needs a name")
        self.__check_unique_name(name)

        next_id = max((item["id"] for item in self.items), default=0) + 1
        item = get_catalog_item_template(
            next_id, name, color if color is not None else self.default_color
        )
        item["description"] = description

        self.is_dirty = True
        self.items.append(item)
        logger.info("catalog item created", kind=self.kind, id=next_id, name=name)
        return deepcopy(item)

    def update_item(
        self,
        id: int,
        name: Optional[str] = None,
        description: Optional[str] = None,
        color: Optional[str] = None,
        remove_description: bool = False,
    ) -> CatalogItem:
        item = self.__find(id)
        if name is not None:
            name = name.strip()
            if not name:
                raise CatalogError(f"A {self.kind[:-1]} needs a name")
            self.__check_unique_name(name, exclude_id=id)

        self.is_dirty = True
        item["updated"] = time.now_utc()
        if name is not None:
            item["name"] = name
        if description is not None:
            item["description"] = description
        if remove_description:
            item["description"] = None
        if color is not None:
            item["color"] = color
        return deepcopy(item)

    def delete_item(self, id: int) -> None:
        item = self.__find(id)
        self.is_dirty = True
        self.items.remove(item)
        logger.info("catalog item deleted", kind=self.kind, id=id)

    def toggle_item_status(self, id: int) -> CatalogItem:
        item = self.__find(id)
        self.is_dirty = True
        item["active"] = not item["active"]
        item["updated"] = time.now_utc()
        return deepcopy(item)


PROJECT_REPO = CatalogRepository(
    "projects", lambda: configuration.DATA_PROJECTS_PATH, DEFAULT_PROJECT_COLOR
)
TAG_REPO = CatalogRepository(
    "tags", lambda: configuration.DATA_TAGS_PATH, DEFAULT_TAG_COLOR
)
