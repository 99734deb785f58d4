from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version

# Version
try:
    __version__ = _pkg_version("numkit")
except PackageNotFoundError:
    __version__ = "0+unknown"

# Public API re-exports
from .bits import from_binary, is_power_of_two, nearest_power_of_two, to_binary
from .combinatorics import (
    CombinatoricsError,
    Err,
    ModularCombinatorics,
    ModulusError,
    Ok,
    TableRangeError,
    TableSizeError,
    precompute,
)
from .config import has_profile, load_settings, read_current_profile
from .interactive import Interactor
from .modular import mod_exp, mod_inverse, power
from .primes import is_prime
from .runtime import APPLY, CFG
from .solver import shifted_scan, solve_stream
from .utility import UserInputError
from .workspace import workspace_dir

__all__ = [
    "APPLY",
    "CFG",
    "CombinatoricsError",
    "Err",
    "Interactor",
    "ModularCombinatorics",
    "ModulusError",
    "Ok",
    "TableRangeError",
    "TableSizeError",
    "UserInputError",
    "__version__",
    "from_binary",
    "has_profile",
    "is_power_of_two",
    "is_prime",
    "load_settings",
    "mod_exp",
    "mod_inverse",
    "nearest_power_of_two",
    "power",
    "precompute",
    "read_current_profile",
    "shifted_scan",
    "solve_stream",
    "to_binary",
    "workspace_dir",
]
