"""Tests for node identifier path handling."""

from pathlib import Path

import pytest

from wikigraph.core.paths import (
    cluster_of,
    directory_of,
    extension,
    join,
    node_id,
    resolve_target,
)


def test_extension():
    """Test extension of the last path element."""
    assert extension("index.wiki") == ".wiki"
    assert extension("diary/2020-01-01.md") == ".md"
    assert extension("archive.v2/notes") == ""
    assert extension(".wiki") == ".wiki"
    assert extension("") == ""


@pytest.mark.parametrize(
    "directory,target,expected",
    [
        (".", "a.wiki", "a.wiki"),
        ("diary", "../link.wiki", "link.wiki"),
        ("diary.wiki", "../link.wiki", "link.wiki"),
        (".", "../outside.wiki", "../outside.wiki"),
        ("a/b", "./c.md", "a/b/c.md"),
        ("a", "b//c.wiki", "a/b/c.wiki"),
        ("a/b", "../../c.wiki", "c.wiki"),
    ],
)
def test_join(directory, target, expected):
    """Test joining and cleaning of link targets."""
    assert join(directory, target) == expected


def test_resolve_target_keeps_key():
    """Test that the linking document's key is passed through."""
    key, target = resolve_target("diary", "diary/2020-01-01.wiki", "../index.wiki")
    assert key == "diary/2020-01-01.wiki"
    assert target == "index.wiki"


def test_node_id():
    """Test identifiers relative to the wiki root."""
    root = Path("/home/me/wiki")
    assert node_id(root, root / "index.wiki") == "index.wiki"
    assert node_id(root, root / "diary" / "2020-01-01.wiki") == "diary/2020-01-01.wiki"


def test_node_id_outside_root():
    """Test that files outside the root are rejected."""
    with pytest.raises(ValueError):
        node_id(Path("/home/me/wiki"), Path("/tmp/other.wiki"))


def test_directory_of():
    """Test containing directory of identifiers."""
    assert directory_of("index.wiki") == "."
    assert directory_of("diary/2020-01-01.wiki") == "diary"
    assert directory_of("a/b/c.md") == "a/b"


def test_cluster_of():
    """Test directory component used for clustering."""
    assert cluster_of("index.wiki") == ""
    assert cluster_of("diary") == ""
    assert cluster_of("projects/work/plan.wiki") == "projects/work"
