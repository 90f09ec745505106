from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version

# Version
try:
    __version__ = _pkg_version("zeckendorf")
except PackageNotFoundError:
    __version__ = "0+unknown"

# Public API re-exports
from .adder import add, add_all
from .codec import decode, encode, is_canonical
from .comparator import compare, compare_magnitude
from .config import load_settings
from .fibonacci import FibonacciSequence, fibonacci
from .normalizer import normalize
from .runtime import APPLY, CFG
from .sign import Sign
from .utility import InvariantViolation, UserInputError, ZeckendorfFormatError, ZeckendorfOverflowError
from .value import ONE, ZERO, ZeckendorfValue

__all__ = [
    "APPLY",
    "CFG",
    "ONE",
    "ZERO",
    "FibonacciSequence",
    "InvariantViolation",
    "Sign",
    "UserInputError",
    "ZeckendorfFormatError",
    "ZeckendorfOverflowError",
    "ZeckendorfValue",
    "__version__",
    "add",
    "add_all",
    "compare",
    "compare_magnitude",
    "decode",
    "encode",
    "fibonacci",
    "is_canonical",
    "load_settings",
    "normalize",
]
