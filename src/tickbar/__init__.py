"""tickbar: throttled in-place progress bars for any Python iterable."""

from tickbar.__version__ import __version__
from tickbar.api import tqdm, trange, ttimer
from tickbar.core import IntRange, ProgressAdapter, ProgressState

__all__ = [
    "IntRange",
    "ProgressAdapter",
    "ProgressState",
    "__version__",
    "tqdm",
    "trange",
    "ttimer",
]
