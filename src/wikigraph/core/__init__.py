"""Link graph model, path resolution and remapping."""

from .graph import LinkGraph
from .remap import Remapper, build_remap
from .wiki import Wiki

__all__ = [
    "LinkGraph",
    "Remapper",
    "build_remap",
    "Wiki",
]
