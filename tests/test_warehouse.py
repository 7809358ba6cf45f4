"""Warehouse catalog + iterator tests."""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from computer_shop.types import Component
from computer_shop.warehouse import Warehouse

EXPECTED = [
    ("RTX 4090", 1600),
    ("Intel i9", 600),
    ("Samsung SSD", 100),
    ("Corsair RAM", 150),
]


class TestIterator:
    def test_yields_catalog_in_order(self):
        it = Warehouse().get_iterator()
        got = []
        while it.has_next():
            item = it.next()
            got.append((item.name, item.price))
        assert got == EXPECTED

    def test_exhausted(self):
        it = Warehouse().get_iterator()
        for _ in range(4):
            assert it.next() is not None
        assert not it.has_next()
        assert it.next() is None
        assert it.next() is None

    def test_independent_cursors(self):
        w = Warehouse()
        a, b = w.get_iterator(), w.get_iterator()
        a.next()
        a.next()
        assert b.next().name == "RTX 4090"
        assert a.next().name == "Samsung SSD"

    def test_not_restartable(self):
        it = Warehouse().get_iterator()
        assert len(list(it)) == 4
        assert list(it) == []
        assert not it.has_next()

    def test_python_protocol(self):
        it = Warehouse().get_iterator()
        assert iter(it) is it
        for _ in range(4):
            next(it)
        with pytest.raises(StopIteration):
            next(it)


class TestWarehouse:
    def test_len(self):
        assert len(Warehouse()) == 4

    def test_iter_is_fresh(self):
        w = Warehouse()
        assert [c.name for c in w] == [c.name for c in w]

    def test_items_immutable(self):
        w = Warehouse()
        assert isinstance(w.components, tuple)
        with pytest.raises(AttributeError):
            w.components[0].price = 1


class TestComponentFormat:
    def test_whole_price(self):
        assert str(Component("RTX 4090", 1600)) == "RTX 4090 ($1600)"

    def test_float_price(self):
        assert str(Component("Fan", 19.5)) == "Fan ($19.5)"

    def test_keeps_every_digit(self):
        assert str(Component("Server", 12345.67)) == "Server ($12345.67)"

    def test_large_whole_price(self):
        assert str(Component("Rack", 1234567)) == "Rack ($1234567)"
