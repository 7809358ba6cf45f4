"""
Lightweight shop metrics collector.

Tracks orders and assembly times per computer variant, plus how often
the catalog was viewed. One instance per facade.
"""
import time
from dataclasses import dataclass
from collections import defaultdict


@dataclass
class VariantMetrics:
    """Per-variant order statistics."""
    orders: int = 0
    total_ms: int = 0
    invalid: int = 0

    @property
    def avg_ms(self) -> float:
        return self.total_ms / max(1, self.orders)

    def record(self, duration_ms: int, invalid: bool = False):
        self.orders += 1
        self.total_ms += duration_ms
        if invalid:
            self.invalid += 1


class ShopMetrics:
    """Order and catalog counters for a single shop."""

    def __init__(self):
        self._variants = defaultdict(VariantMetrics)
        self._catalog_views = 0
        self._start = time.time()

    def record_order(self, variant: str, duration_ms: int, invalid: bool = False):
        self._variants[variant].record(duration_ms, invalid)

    def record_catalog_view(self):
        self._catalog_views += 1

    @property
    def total_orders(self) -> int:
        return sum(m.orders for m in self._variants.values())

    def snapshot(self) -> dict:
        uptime = time.time() - self._start
        return {
            "uptime_s": round(uptime, 1),
            "catalog_views": self._catalog_views,
            "total_orders": self.total_orders,
            "variants": {
                name: {
                    "orders": m.orders,
                    "avg_ms": round(m.avg_ms),
                    "invalid": m.invalid,
                }
                for name, m in self._variants.items()
            },
        }
