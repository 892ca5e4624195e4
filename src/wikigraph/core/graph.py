from collections.abc import Iterator

from .model import Edge, NodeId


class LinkGraph:
    """
    Adjacency lists from each document to the documents it links to.

    Targets keep their first-insertion order and appear at most once per
    source. Entries are never removed.
    """

    def __init__(self) -> None:
        self._out: dict[NodeId, list[NodeId]] = {}

    def ensure_node(self, node: NodeId) -> None:
        if node not in self._out:
            self._out[node] = []

    def insert(self, source: NodeId, target: NodeId) -> None:
        targets = self._out.setdefault(source, [])
        # exact, case-sensitive membership
        if target not in targets:
            targets.append(target)

    def targets(self, node: NodeId) -> list[NodeId]:
        return list(self._out.get(node, ()))

    def out_degree(self, node: NodeId) -> int:
        return len(self._out.get(node, ()))

    def items(self) -> Iterator[tuple[NodeId, list[NodeId]]]:
        for node, targets in self._out.items():
            yield node, list(targets)

    def edges(self) -> Iterator[Edge]:
        for node, targets in self._out.items():
            for target in targets:
                yield Edge(node, target)

    def edge_count(self) -> int:
        return sum(len(targets) for targets in self._out.values())

    def __contains__(self, node: object) -> bool:
        return node in self._out

    def __iter__(self) -> Iterator[NodeId]:
        return iter(self._out)

    def __len__(self) -> int:
        return len(self._out)
