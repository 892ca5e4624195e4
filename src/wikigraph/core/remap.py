"""Renaming, collapsing and ignoring of node identifiers."""

import re
from collections.abc import Mapping

from ..config import ConfigError
from .model import NodeId
from .paths import resolve_target

DIARY_DIR = "diary"
DIARY_NODE = "diary.wiki"


class Remapper:
    """
    Apply configured ``pattern -> replacement`` pairs and the ignore pattern.

    A pair renames the linking document when ``pattern`` equals its
    directory, and replaces the whole link target when ``pattern`` occurs
    anywhere in it. Pairs are applied in insertion order, so when several
    pairs match the last one wins.
    """

    def __init__(self, remap: Mapping[str, str] | None = None, ignore: str = ""):
        self.pairs: dict[str, str] = dict(remap or {})
        self.ignore = ignore
        self._ignored: re.Pattern[str] | None = None
        if ignore:
            try:
                self._ignored = re.compile(ignore)
            except re.error as e:
                raise ConfigError(f"Invalid ignore pattern {ignore!r}: {e}") from e

    def remap(self, directory: str, key: NodeId, target: NodeId) -> tuple[NodeId, NodeId]:
        for pattern, replacement in self.pairs.items():
            if pattern == directory:
                key = replacement
            if pattern in target:
                target = replacement
        return key, target

    def resolve(self, directory: str, key: NodeId, link: str) -> tuple[NodeId, NodeId]:
        """Join ``link`` onto ``directory`` and apply the remap table."""
        key, target = resolve_target(directory, key, link)
        return self.remap(directory, key, target)

    def ignore_path(self, path: str) -> bool:
        if self._ignored is None:
            return False
        return self._ignored.search(path) is not None


def build_remap(extra: Mapping[str, str] | None = None, collapse_diary: bool = True) -> dict[str, str]:
    """
    Build the remap table for a run.

    The diary pair goes first so user pairs matching the same paths take
    precedence over it.
    """
    remap: dict[str, str] = {}
    if collapse_diary:
        remap[DIARY_DIR] = DIARY_NODE
    for pattern, replacement in (extra or {}).items():
        remap[pattern] = replacement
    return remap
