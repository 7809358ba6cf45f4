"""
Computer shop facade — the only object a customer talks to.

Owns one director, one warehouse and one builder per variant for its
whole lifetime. Shop output goes to `stream` (stdout by default);
structured events go to the logger on stderr.
"""
import sys
import time

from computer_shop.builders import ComputerBuilder, GamingPCBuilder, OfficePCBuilder, resolve_variant
from computer_shop.director import Director
from computer_shop.logger import ShopLogger
from computer_shop.metrics import ShopMetrics
from computer_shop.types import BuilderVariant, Component, Computer
from computer_shop.validators import validate_computer
from computer_shop.warehouse import Warehouse

ORDER_TITLES = {
    BuilderVariant.GAMING: "Gaming PC",
    BuilderVariant.OFFICE: "Office PC",
}


class ComputerShopFacade:
    def __init__(self, stream=None, logger: ShopLogger | None = None,
                 metrics: ShopMetrics | None = None):
        self.stream = stream or sys.stdout
        self.log = logger or ShopLogger()
        self.metrics = metrics or ShopMetrics()
        self.director = Director(logger=self.log)
        self.warehouse = Warehouse()
        self.builders: dict[BuilderVariant, ComputerBuilder] = {
            BuilderVariant.GAMING: GamingPCBuilder(),
            BuilderVariant.OFFICE: OfficePCBuilder(),
        }

    def _say(self, line: str):
        print(line, file=self.stream)

    def show_catalog(self) -> list[Component]:
        """List every warehouse item, one `<name> ($<price>)` line each."""
        listed = []
        iterator = self.warehouse.get_iterator()
        while iterator.has_next():
            item = iterator.next()
            self._say(str(item))
            listed.append(item)
        self.metrics.record_catalog_view()
        self.log.catalog_listed(len(listed))
        return listed

    def buy(self, variant) -> Computer:
        """Assemble and hand over one computer of the given variant."""
        variant = resolve_variant(variant)
        t0 = time.monotonic()
        self.log.order_start(variant.value)
        self._say(f"--- Preparing {ORDER_TITLES[variant]} Order ---")

        self.director.set_builder(self.builders[variant])
        pc = self.director.construct_computer()

        ok, errors = validate_computer(pc)
        if not ok:
            self.log.order_invalid(variant.value, errors)

        self._say(f"Assembled: {pc}")
        self._say("Order completed!")

        ms = int((time.monotonic() - t0) * 1000)
        self.metrics.record_order(variant.value, ms, invalid=not ok)
        self.log.order_done(variant.value, ms)
        return pc

    def buy_gaming_pc(self) -> Computer:
        return self.buy(BuilderVariant.GAMING)

    def buy_office_pc(self) -> Computer:
        return self.buy(BuilderVariant.OFFICE)
