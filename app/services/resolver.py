"""Resolution of a list id to its single effective body."""

from __future__ import annotations

from typing import Iterable, Mapping

from ..catalog import CatalogStore
from ..models import CuratedList, ListCategory


class ListResolver:
    """Apply ``custom > override > canonical`` precedence by list id.

    The resolver reads the live override and custom-list mappings on every
    call and keeps no cache, so writes made by the session are visible to
    the next read.
    """

    def __init__(
        self,
        catalog: CatalogStore,
        overrides: Mapping[str, CuratedList],
        custom_lists: Mapping[str, CuratedList],
    ):
        self._catalog = catalog
        self._overrides = overrides
        self._custom_lists = custom_lists

    def resolve(self, list_id: str) -> CuratedList | None:
        """Return a copy of the effective list or ``None`` for unknown ids."""

        custom = self._custom_lists.get(list_id)
        if custom is not None:
            return custom.model_copy(deep=True)
        override = self._overrides.get(list_id)
        if override is not None:
            return override.model_copy(deep=True)
        return self._catalog.get(list_id)

    def is_known(self, list_id: str) -> bool:
        return (
            list_id in self._custom_lists
            or list_id in self._overrides
            or list_id in self._catalog
        )

    def home_categories(self) -> list[ListCategory]:
        """Return the catalog categories with overrides applied by id."""

        categories: list[ListCategory] = []
        for category in self._catalog.categories:
            lists = [
                self.resolve(curated.id) or curated for curated in category.lists
            ]
            categories.append(ListCategory(title=category.title, lists=lists))
        return categories

    def vault_lists(self, vault_ids: Iterable[str]) -> list[CuratedList]:
        """Return saved lists followed by custom lists not already saved."""

        resolved: list[CuratedList] = []
        seen: set[str] = set()
        for list_id in vault_ids:
            if list_id in seen:
                continue
            curated = self.resolve(list_id)
            if curated is None:
                continue
            seen.add(list_id)
            resolved.append(curated)
        for list_id in self._custom_lists:
            if list_id in seen:
                continue
            seen.add(list_id)
            resolved.append(self._custom_lists[list_id].model_copy(deep=True))
        return resolved
