"""DOT export of link graphs."""

import logging

import pydot

from ..core.graph import LinkGraph
from ..core.model import NodeId
from ..core.paths import cluster_of
from ..core.ports import GraphExporter

logger = logging.getLogger("wikigraph.export.dot")


def quote(name: str) -> str:
    """
    Double-quote a DOT identifier.

    pydot leaves quoted names alone, so a `:` in a page name is not read
    as a port separator.
    """
    return '"' + name.replace('"', '\\"') + '"'


class DotExporter(GraphExporter):
    """
    Convert a :class:`LinkGraph` into a directed ``pydot`` graph.

    Only documents with at least ``level`` outgoing links are drawn as
    sources, together with their links. A document that falls below the
    level can still show up as the target of another document's link.

    With ``cluster`` enabled, every node that lives in a subdirectory is
    placed in a cluster subgraph named after that directory.
    """

    def __init__(self, graph: LinkGraph, graph_name: str = "wiki", rankdir: str = "LR"):
        self.graph = graph
        self.graph_name = graph_name
        self.rankdir = rankdir

    def render(self, level: int = 0, cluster: bool = False) -> pydot.Dot:
        dot = pydot.Dot(graph_name=self.graph_name, graph_type="digraph", rankdir=self.rankdir)
        nodes: dict[NodeId, pydot.Node] = {}
        clusters: dict[str, pydot.Cluster] = {}

        def node(name: NodeId) -> pydot.Node:
            handle = nodes.get(name)
            if handle is not None:
                return handle
            handle = pydot.Node(quote(name))
            directory = cluster_of(name)
            if cluster and directory:
                subgraph = clusters.get(directory)
                if subgraph is None:
                    subgraph = pydot.Cluster(graph_name=directory, label=quote(directory))
                    subgraph.set_name(quote("cluster_" + directory))
                    clusters[directory] = subgraph
                    dot.add_subgraph(subgraph)
                subgraph.add_node(handle)
            else:
                dot.add_node(handle)
            nodes[name] = handle
            return handle

        for source, targets in self.graph.items():
            if self.graph.out_degree(source) < level:
                continue
            a = node(source)
            for target in targets:
                b = node(target)
                # the same pair may come from another scope
                if not dot.get_edge(a.get_name(), b.get_name()):
                    dot.add_edge(pydot.Edge(a, b))

        logger.debug(
            "rendered %d nodes in %d clusters at level %d", len(nodes), len(clusters), level
        )
        return dot


def count_nodes(graph: pydot.Graph) -> int:
    """Number of nodes declared in ``graph`` and all of its subgraphs."""
    total = len(graph.get_nodes())
    for subgraph in graph.get_subgraphs():
        total += count_nodes(subgraph)
    return total


def to_dot(graph: LinkGraph, level: int = 0, cluster: bool = False) -> str:
    return DotExporter(graph).render(level=level, cluster=cluster).to_string()
