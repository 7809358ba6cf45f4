"""
Computer builders — one preset per shop variant.

Each build step writes a single hardcoded field. Steps touch disjoint
fields, so they may run in any order. get_product() hands the computer
over to the caller and starts the builder on a fresh one.
"""
from computer_shop.errors import UnknownVariantError
from computer_shop.types import BuilderVariant, Computer


class ComputerBuilder:
    """Base builder. Subclasses only declare their preset parts."""

    VARIANT: BuilderVariant | None = None
    CPU = ""
    GPU = ""
    RAM = ""
    STORAGE = ""
    COOLING = ""

    def __init__(self):
        self.computer = Computer()

    @property
    def name(self) -> str:
        return self.VARIANT.value if self.VARIANT else type(self).__name__

    def build_cpu(self):
        self.computer.cpu = self.CPU

    def build_gpu(self):
        self.computer.gpu = self.GPU

    def build_ram(self):
        self.computer.ram = self.RAM

    def build_storage(self):
        self.computer.storage = self.STORAGE

    def build_cooling(self):
        self.computer.cooling = self.COOLING

    def reset(self):
        self.computer = Computer()

    def get_product(self) -> Computer:
        """Return the computer as built so far; unbuilt fields stay empty."""
        product = self.computer
        self.reset()
        return product


class GamingPCBuilder(ComputerBuilder):
    VARIANT = BuilderVariant.GAMING
    CPU = "Intel Core i9-13900K"
    GPU = "NVIDIA RTX 4090"
    RAM = "32GB DDR5"
    STORAGE = "2TB NVMe SSD"
    COOLING = "Liquid Cooling System"


class OfficePCBuilder(ComputerBuilder):
    VARIANT = BuilderVariant.OFFICE
    CPU = "Intel Core i3-12100"
    GPU = "Integrated Graphics"
    RAM = "8GB DDR4"
    STORAGE = "512GB SSD"
    COOLING = "Standard Air Cooler"


# Registry for dispatch
BUILDERS = {
    BuilderVariant.GAMING: GamingPCBuilder,
    BuilderVariant.OFFICE: OfficePCBuilder,
}


def resolve_variant(variant) -> BuilderVariant:
    """Accept a BuilderVariant or its string value."""
    try:
        return BuilderVariant(variant)
    except ValueError:
        raise UnknownVariantError(str(variant)) from None


def create_builder(variant) -> ComputerBuilder:
    return BUILDERS[resolve_variant(variant)]()
