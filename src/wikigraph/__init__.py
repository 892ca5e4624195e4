"""wikigraph - link graphs for vimwiki and markdown note collections."""

__version__ = "0.3.0"
