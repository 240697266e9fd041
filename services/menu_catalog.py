"""
Menu catalog - read-only lookup and search over menu items
"""
from typing import Dict, List, Any, Optional, Iterable, Tuple
from difflib import SequenceMatcher

from models.menu import MenuItem, MenuCategory
from .menu_data import DEFAULT_MENU_ITEMS


def parse_category(category) -> Optional[MenuCategory]:
    # None / "" / "all" mean no category filter
    if category is None or isinstance(category, MenuCategory):
        return category
    if category in ("", "all"):
        return None
    return MenuCategory(category)


class MenuCatalog:
    # Static menu, built once at start-up and never mutated

    def __init__(self, items: Iterable[MenuItem] = DEFAULT_MENU_ITEMS):
        self._items: Tuple[MenuItem, ...] = tuple(items)
        self._by_id: Dict[str, MenuItem] = {}
        for item in self._items:
            if item.item_id in self._by_id:
                raise ValueError(f"Duplicate menu item id: {item.item_id}")
            if item.unit_price < 0:
                raise ValueError(f"Negative price for menu item: {item.item_id}")
            self._by_id[item.item_id] = item

    def __len__(self) -> int:
        return len(self._items)

    def similarity(self, a: str, b: str) -> float:
        # similarity score between 0.0 and 1.0
        return SequenceMatcher(None, a.lower(), b.lower()).ratio()

    def get_item(self, item_id: str) -> Optional[MenuItem]:
        # ids come from clients as raw JSON; anything but a string is unknown
        if not isinstance(item_id, str):
            return None
        return self._by_id.get(item_id)

    def list_items(self, category=None) -> List[MenuItem]:
        """List menu items in catalog order, optionally for one category.

        Raises ValueError for an unknown category name.
        """
        category = parse_category(category)
        if category is None:
            return list(self._items)
        return [item for item in self._items if item.category is category]

    def categories(self) -> List[MenuCategory]:
        # categories that actually have items, in catalog order
        seen = []
        for item in self._items:
            if item.category not in seen:
                seen.append(item.category)
        return seen

    def find_items(self, query: str, category=None, limit: int = 5) -> Dict[str, Any]:
        # Return menu items matching the query along with their similarity score
        try:
            items = self.list_items(category)
        except ValueError as e:
            return {
                "success": False,
                "error": str(e),
                "matches": [],
                "total_found": 0
            }

        query = (query or "").strip()
        matches = []
        for item in items:
            # substring hits always count as strong matches
            score = self.similarity(query, item.name)
            if query and query.lower() in item.name.lower():
                score = max(score, 0.9)
            if score > 0.3:
                match = item.to_dict()
                match["match_score"] = round(score, 2)
                matches.append(match)

        matches.sort(key=lambda x: x["match_score"], reverse=True)
        matches = matches[:limit]

        return {
            "success": True,
            "matches": matches,
            "total_found": len(matches)
        }
