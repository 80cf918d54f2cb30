__version__ = "0.1.0"

import importlib as _importlib

from .errors import *
from .interp import interpolate, interpolate_unchecked
from .tools import make_interpolator, make_kernel

# Modules reachable as attributes, lazily imported if not already loaded
modules = ["lib", "linear"]

__all__ = modules + [
    k for (k, v) in locals().items() if not k.startswith("_")
]  # all local, public functions


def __dir__():
    return __all__


# Lazy load of modules.
def __getattr__(name):
    if name in modules:
        return _importlib.import_module(f"plinterp.{name}")
    else:
        try:
            return globals()[name]
        except KeyError:
            raise AttributeError(f"Module 'plinterp' has no attribute '{name}'")
