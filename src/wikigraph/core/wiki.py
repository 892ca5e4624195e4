import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from ..adapters.fs_walker import walk_files
from ..adapters.link_parser import LinkParser
from .graph import LinkGraph
from .model import Edge
from .paths import directory_of, node_id
from .ports import FileEnumerator, LinkParserStrategy
from .remap import Remapper

logger = logging.getLogger("wikigraph.wiki")


class Wiki:
    """
    Builds the link graph of one wiki directory.

    A ``Wiki`` is meant for a single run: construct it, ``walk`` the root,
    hand ``graph`` to an exporter and discard it.
    """

    def __init__(
        self,
        root: Path,
        remapper: Remapper,
        parser: LinkParserStrategy | None = None,
        walker: FileEnumerator | None = None,
    ):
        self.root = Path(root)
        self.remapper = remapper
        self.parser = parser or LinkParser()
        self.walker = walker or walk_files
        self.graph = LinkGraph()

    def walk(self, skip_dirs: Iterable[str]) -> None:
        """Add every file below the root except skipped and ignored ones."""
        files = self.walker(self.root, skip_dirs, ignore=self.remapper.ignore_path)
        for path in files:
            self.add(path)
        logger.debug(
            "built graph: %d nodes, %d edges", len(self.graph), self.graph.edge_count()
        )

    def add(self, path: Path) -> None:
        """
        Add ``path`` and all of its links to the graph.

        The document gets a node even when it has no links.
        """
        key = node_id(self.root, path)
        self.graph.ensure_node(key)
        for edge in self._scan(path, key):
            self.graph.insert(edge.source, edge.target)

    def links_of(self, path: Path) -> list[Edge]:
        """Edges that ``path`` contributes, without touching the graph."""
        key = node_id(self.root.resolve(), Path(path).resolve())
        edges: list[Edge] = []
        for edge in self._scan(path, key):
            if edge not in edges:
                edges.append(edge)
        return edges

    def _scan(self, path: Path, key: str) -> Iterator[Edge]:
        directory = directory_of(key)
        with open(path, encoding="utf-8", errors="replace") as f:
            for line in f:
                for link in self.parser.links(line):
                    if self.remapper.ignore_path(link):
                        continue
                    # join, then rename or collapse
                    key, target = self.remapper.resolve(directory, key, link)
                    if self.remapper.ignore_path(target):
                        continue
                    yield Edge(key, target)
