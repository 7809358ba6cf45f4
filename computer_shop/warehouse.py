"""
Warehouse — the shop's fixed catalog and its iterator.

The catalog is filled once at construction and never changes. Every
get_iterator() call returns an independent, forward-only cursor.
"""
from typing import Optional

from computer_shop.types import Component

STOCK = (
    ("RTX 4090", 1600),
    ("Intel i9", 600),
    ("Samsung SSD", 100),
    ("Corsair RAM", 150),
)


class ComponentIterator:
    """Cursor over a warehouse's items. Cannot be rewound; make a new one."""

    def __init__(self, components: tuple[Component, ...]):
        self._components = components
        self.index = 0

    def has_next(self) -> bool:
        return self.index < len(self._components)

    def next(self) -> Optional[Component]:
        """Return the next item, or None once the catalog is exhausted."""
        if not self.has_next():
            return None
        item = self._components[self.index]
        self.index += 1
        return item

    def __iter__(self):
        return self

    def __next__(self) -> Component:
        item = self.next()
        if item is None:
            raise StopIteration
        return item


class Warehouse:
    def __init__(self):
        self._components = tuple(Component(name, float(price)) for name, price in STOCK)

    @property
    def components(self) -> tuple[Component, ...]:
        return self._components

    def get_iterator(self) -> ComponentIterator:
        return ComponentIterator(self._components)

    def __iter__(self):
        return self.get_iterator()

    def __len__(self) -> int:
        return len(self._components)
