from __future__ import annotations
from dataclasses import dataclass

NodeId = str

WIKI_EXT = ".wiki"
MARKDOWN_EXT = ".md"
DOCUMENT_EXTS = (WIKI_EXT, MARKDOWN_EXT)


@dataclass(frozen=True)
class Edge:
    source: NodeId
    target: NodeId
