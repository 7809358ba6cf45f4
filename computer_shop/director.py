"""
Director — runs a builder's steps in the shop's canonical order.

Holds a reference to the currently assigned builder and nothing else,
so one director can be reused across any number of orders.
"""
from computer_shop.builders import ComputerBuilder
from computer_shop.errors import DirectorStateError
from computer_shop.logger import ShopLogger
from computer_shop.types import Computer

BUILD_ORDER = ("cpu", "ram", "gpu", "storage", "cooling")


class Director:
    def __init__(self, logger: ShopLogger | None = None):
        self.builder: ComputerBuilder | None = None
        self.log = logger or ShopLogger(enabled=False)

    def set_builder(self, builder: ComputerBuilder):
        self.builder = builder

    def construct_computer(self, builder: ComputerBuilder | None = None) -> Computer:
        """Run the canonical steps. A passed builder replaces the assigned one."""
        if builder is not None:
            self.set_builder(builder)
        if self.builder is None:
            raise DirectorStateError()

        for step in BUILD_ORDER:
            getattr(self.builder, f"build_{step}")()
            self.log.build_step(self.builder.name, step)
        return self.builder.get_product()
