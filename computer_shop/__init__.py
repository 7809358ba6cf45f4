"""
Computer Shop — Builder, Iterator and Facade patterns on a toy PC store.

Public API:
    from computer_shop import ComputerShopFacade, Director, Warehouse
    from computer_shop import GamingPCBuilder, OfficePCBuilder
    from computer_shop.types import Computer, Component, BuilderVariant
    from computer_shop.config import CONFIG
"""
from computer_shop.builders import BUILDERS, ComputerBuilder, GamingPCBuilder, OfficePCBuilder, create_builder
from computer_shop.config import CONFIG
from computer_shop.director import Director
from computer_shop.facade import ComputerShopFacade
from computer_shop.types import BuilderVariant, Component, Computer
from computer_shop.warehouse import ComponentIterator, Warehouse

__version__ = "1.0.0"
__all__ = [
    "ComputerShopFacade", "Director", "Warehouse", "ComponentIterator",
    "ComputerBuilder", "GamingPCBuilder", "OfficePCBuilder", "BUILDERS", "create_builder",
    "Computer", "Component", "BuilderVariant", "CONFIG",
]
