"""Path handling for node identifiers.

Node identifiers are ``/``-separated paths relative to the wiki root, so the
helpers here work on plain strings with :mod:`posixpath` semantics regardless
of the host platform.
"""

import posixpath
from pathlib import Path

from .model import NodeId


def extension(path: str) -> str:
    """
    Return the extension of the last path element, including the dot.

    Unlike :func:`posixpath.splitext`, a leading dot counts as the start of
    the extension, so ``extension(".wiki")`` is ``".wiki"``.

    Examples:
        >>> extension("diary/2020-01-01.wiki")
        '.wiki'
        >>> extension("notes.v2/todo")
        ''
    """
    name = path.rsplit("/", 1)[-1]
    idx = name.rfind(".")
    if idx < 0:
        return ""
    return name[idx:]


def join(directory: str, target: str) -> str:
    """Join ``target`` onto ``directory`` and clean ``.``/``..`` segments."""
    if not directory:
        joined = target
    elif not target:
        joined = directory
    else:
        joined = f"{directory}/{target}"
    if not joined:
        return ""
    return posixpath.normpath(joined)


def resolve_target(directory: str, key: NodeId, target: str) -> tuple[NodeId, NodeId]:
    """
    Resolve a parsed link target relative to the linking document.

    Args:
        directory: Directory of the linking document, relative to the root
        key: Identifier of the linking document (returned unchanged)
        target: Target as written in the link, extension already resolved

    Returns:
        Tuple of (key, resolved target)
    """
    return key, join(directory, target)


def node_id(root: Path, path: Path) -> NodeId:
    """
    Identifier of ``path`` relative to ``root``.

    Raises:
        ValueError: If ``path`` does not lie under ``root``
    """
    return Path(path).relative_to(root).as_posix()


def directory_of(key: NodeId) -> str:
    """Containing directory of ``key``, ``"."`` for documents at the root."""
    head = posixpath.dirname(key)
    return head or "."


def cluster_of(key: NodeId) -> str:
    """Directory component of ``key`` used for clustering, ``""`` if none."""
    return posixpath.dirname(key)
