# Symmetric primitives resolved by name; importing the modules fills the registry
from isoecies.primitives import dem as dem
from isoecies.primitives import kdf as kdf
from isoecies.primitives import mac as mac
from isoecies.primitives.registry import (
    DEM as DEM,
)
from isoecies.primitives.registry import (
    KDF as KDF,
)
from isoecies.primitives.registry import (
    MAC as MAC,
)
from isoecies.primitives.registry import (
    registry as registry,
)
from isoecies.primitives.registry import (
    resolve as resolve,
)

__all__ = ["DEM", "KDF", "MAC", "registry", "resolve"]
