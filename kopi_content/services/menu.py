"""Cafe menu repository."""

from __future__ import annotations

from kopi_content.schemas import MenuCategory, MenuItem, MenuItemCreate, MenuItems, MenuItemUpdate
from kopi_content.services import collections
from kopi_content.services.content import ContentRepository


class MenuRepository(ContentRepository[MenuItem]):
    collection = collections.MENU
    entity = MenuItem
    patch = MenuItemUpdate

    async def add(self, data: MenuItemCreate) -> MenuItem:
        return await self._add_document(data.to_document())

    async def list_grouped(self) -> MenuItems:
        grouped: dict[MenuCategory, list[MenuItem]] = {category: [] for category in MenuCategory}
        for item in await self.list():
            grouped[item.category].append(item)
        return MenuItems(
            hot=grouped[MenuCategory.HOT],
            cold=grouped[MenuCategory.COLD],
            manual=grouped[MenuCategory.MANUAL],
            signature=grouped[MenuCategory.SIGNATURE],
        )
