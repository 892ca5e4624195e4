"""Runtime wiring helper for CLI applications."""

from dataclasses import dataclass
from pathlib import Path

from .adapters.fs_walker import DEFAULT_SKIP_DIRS
from .config import WikigraphConfig, load_config
from .core.remap import Remapper, build_remap
from .core.wiki import Wiki


@dataclass
class Runtime:
    """Container for all wired components."""
    wiki: Wiki
    config: WikigraphConfig
    skip_dirs: list[str]


def build_runtime(
    wiki_path: Path | None = None,
    config_path: Path | None = None,
    collapse_diary: bool | None = None,
    ignore: str | None = None,
    skip_dirs: list[str] | None = None,
) -> Runtime:
    """
    Build and wire all components for one run over a wiki.

    Arguments left as ``None`` fall back to the configuration file, then to
    the defaults. The ignore pattern is compiled here, so a malformed one
    fails before any file is read.
    """
    config = load_config(config_path=config_path, wiki_path=wiki_path)

    # Use config values if CLI args not provided
    if wiki_path is None:
        wiki_path = config.wiki.root or Path.cwd()
    if collapse_diary is None:
        collapse_diary = config.graph.collapse_diary
    if ignore is None:
        ignore = config.graph.ignore

    remapper = Remapper(
        build_remap(config.graph.remap, collapse_diary=collapse_diary),
        ignore=ignore,
    )
    wiki = Wiki(wiki_path, remapper)

    skip = list(DEFAULT_SKIP_DIRS)
    for name in [*config.wiki.skip, *(skip_dirs or [])]:
        if name not in skip:
            skip.append(name)

    return Runtime(wiki=wiki, config=config, skip_dirs=skip)
