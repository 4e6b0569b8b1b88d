"""Exception hierarchy shared across vaultwalk.

Concrete errors live next to the code that raises them; this module only
holds the bases the app's dispatch loop catches.
"""


class VaultwalkError(Exception):
    """Base class for every error vaultwalk raises on purpose."""


class StoreError(VaultwalkError):
    """A transport or store-side failure (network, status, malformed body)."""


class AppError(VaultwalkError):
    """A user-facing policy violation, e.g. an empty key or a duplicate rename."""
