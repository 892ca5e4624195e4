"""Configuration loader for wikigraph.toml."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore

CONFIG_NAME = "wikigraph.toml"


class ConfigError(ValueError):
    """Invalid configuration value or ignore pattern."""


@dataclass
class WikiConfig:
    """Wiki directory configuration."""
    root: Path | None = None
    skip: list[str] = field(default_factory=list)


@dataclass
class GraphConfig:
    """Graph building and rendering configuration."""
    cluster: bool = False
    level: int = 0
    ignore: str = ""
    collapse_diary: bool = True
    remap: dict[str, str] = field(default_factory=dict)


@dataclass
class WikigraphConfig:
    """Complete wikigraph configuration."""
    wiki: WikiConfig
    graph: GraphConfig
    path: Path | None = None


def _typed(table: dict[str, Any], key: str, kind: type, default: Any, section: str) -> Any:
    value = table.get(key, default)
    # bool is an int subclass, keep `level = true` out
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ConfigError(
            f"[{section}] {key} must be {kind.__name__}, got {type(value).__name__}"
        )
    return value


def load_config(config_path: Path | None = None, wiki_path: Path | None = None) -> WikigraphConfig:
    """
    Load configuration from wikigraph.toml.

    Search order:
    1. config_path (if provided)
    2. cwd/wikigraph.toml
    3. wiki_path/wikigraph.toml

    Args:
        config_path: Explicit path to config file
        wiki_path: Wiki root path for fallback search

    Returns:
        WikigraphConfig with resolved settings

    Raises:
        ConfigError: On malformed TOML or wrongly typed values
    """
    toml_data: dict[str, Any] = {}
    found: Path | None = None

    search_paths = []
    if config_path:
        search_paths.append(config_path)
    search_paths.append(Path.cwd() / CONFIG_NAME)
    if wiki_path:
        search_paths.append(Path(wiki_path) / CONFIG_NAME)

    for path in search_paths:
        if path.exists():
            try:
                with open(path, "rb") as f:
                    toml_data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(f"{path}: {e}") from e
            found = path
            break

    # Parse wiki config
    wiki_data = toml_data.get("wiki", {})
    root = wiki_data.get("root")
    skip = _typed(wiki_data, "skip", list, [], "wiki")
    wiki_config = WikiConfig(
        root=Path(root).expanduser() if root else None,
        skip=[str(name) for name in skip],
    )

    # Parse graph config
    graph_data = toml_data.get("graph", {})
    remap_data = toml_data.get("remap", {})
    if not isinstance(remap_data, dict):
        raise ConfigError("[remap] must be a table of pattern = replacement pairs")
    graph_config = GraphConfig(
        cluster=_typed(graph_data, "cluster", bool, False, "graph"),
        level=_typed(graph_data, "level", int, 0, "graph"),
        ignore=_typed(graph_data, "ignore", str, "", "graph"),
        collapse_diary=_typed(graph_data, "collapse_diary", bool, True, "graph"),
        remap={str(k): str(v) for k, v in remap_data.items()},
    )
    if graph_config.level < 0:
        raise ConfigError("[graph] level must not be negative")

    return WikigraphConfig(wiki=wiki_config, graph=graph_config, path=found)
