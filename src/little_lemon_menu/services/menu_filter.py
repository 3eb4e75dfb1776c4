"""Search and category filtering over a loaded menu list.

All functions here are pure: they never mutate their inputs and always
recompute the result from scratch.
"""

from little_lemon_menu.models.menu_models import FilterState, MenuItem


def matches_query(item: MenuItem, query: str) -> bool:
    """Case-insensitive substring match against name or description."""
    if not query:
        return True

    needle = query.lower()
    if needle in item.name.lower():
        return True
    return item.description is not None and needle in item.description.lower()


def matches_category(item: MenuItem, category: str) -> bool:
    """Case-insensitive category equality; an empty category matches everything."""
    if not category:
        return True
    return item.category.lower() == category.lower()


def filter_menu(items: list[MenuItem], state: FilterState) -> list[MenuItem]:
    """Select the menu items visible under the given filter state.

    Args:
        items: Full menu list
        state: Current search query and category selection

    Returns:
        The matching items, in their original relative order
    """
    return [
        item
        for item in items
        if matches_query(item, state.query) and matches_category(item, state.selected_category)
    ]
