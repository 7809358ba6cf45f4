"""
Typed exception hierarchy for the shop.

Only the director can fail structurally (construction without a builder).
Variant lookup failures come from the CLI/registry surface. All inherit
from ShopError.
"""


class ShopError(Exception):
    """Base exception for all shop errors."""
    def __init__(self, message: str, component: str = "", recoverable: bool = False):
        self.component = component
        self.recoverable = recoverable
        super().__init__(message)


class DirectorStateError(ShopError):
    """Director asked to construct a computer before a builder was assigned."""
    def __init__(self, message: str = "No builder assigned to director"):
        super().__init__(message, component="director")


class UnknownVariantError(ShopError):
    """Requested builder variant is not in the registry."""
    def __init__(self, variant: str):
        self.variant = variant
        super().__init__(f"Unknown computer variant: {variant!r}", component="builders")
