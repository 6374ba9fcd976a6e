"""Version information for tickbar."""

__version__ = "0.3.0"
__author__ = "tickbar developers"
__license__ = "MIT"
__description__ = "Throttled in-place progress bars for any Python iterable"
