"""Menu filtering by granted resources."""

from dataclasses import replace
from typing import Iterable, List, Sequence, Tuple

from ..acl.entities import Action
from ..acl.matcher import matches
from .entities import MenuItem


def _is_visible(item: MenuItem, resources: Sequence[str]) -> bool:
    if not resources:
        return False
    if item.resource is None:
        return True
    return any(matches(item.resource, resource) for resource in resources)


def filter_menu(items: Iterable[MenuItem], resources: Sequence[str]) -> List[MenuItem]:
    """
    Keep the items the granted resources cover, recursing into children.

    An item without a resource is shown as long as at least one resource is
    granted. Filtered children are set on copies; the input tree is left
    untouched.
    """
    visible: List[MenuItem] = []
    for item in items:
        if not _is_visible(item, resources):
            continue
        if item.children is not None:
            item = replace(item, children=tuple(filter_menu(item.children, resources)))
        visible.append(item)
    return visible


class MenuRegistry:
    """Read-only menu tree declared at startup."""

    def __init__(self, items: Iterable[MenuItem]):
        self._items: Tuple[MenuItem, ...] = tuple(items)

    @property
    def items(self) -> Tuple[MenuItem, ...]:
        return self._items

    def items_for(self, action: Action) -> List[MenuItem]:
        """Items visible for an effective action."""
        return filter_menu(self._items, action.get_resources())
