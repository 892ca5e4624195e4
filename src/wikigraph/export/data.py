import json
from typing import Any

from ..core.graph import LinkGraph
from ..core.ports import GraphExporter


class DataExporter(GraphExporter):
    """Level-filtered graph as plain data, for ``--format json``."""

    def __init__(self, graph: LinkGraph):
        self.graph = graph

    def render(self, level: int = 0, cluster: bool = False) -> dict[str, Any]:
        # Clusters only exist in DOT output; the node ids carry the directory.
        nodes: set[str] = set()
        edges: list[dict[str, str]] = []
        for source, targets in self.graph.items():
            if self.graph.out_degree(source) < level:
                continue
            nodes.add(source)
            for target in targets:
                nodes.add(target)
                edges.append({"source": source, "target": target})
        return {"nodes": sorted(nodes), "edges": edges}


def to_json(graph: LinkGraph, level: int = 0) -> str:
    return json.dumps(DataExporter(graph).render(level=level), indent=2)
