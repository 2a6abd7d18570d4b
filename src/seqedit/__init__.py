"""seqedit package."""
from importlib.metadata import version, PackageNotFoundError

from .distance import distance_grid, levenshtein, levenshtein_iter
from .grid import Cell, Grid, InvalidIndexError, Selector

try:
    __version__ = version("seqedit")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "Cell",
    "Grid",
    "InvalidIndexError",
    "Selector",
    "distance_grid",
    "levenshtein",
    "levenshtein_iter",
]
