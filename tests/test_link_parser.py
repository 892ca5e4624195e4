"""Tests for wiki and markdown link parsing."""

import pytest

from wikigraph.adapters.link_parser import (
    LinkParser,
    parse_markdown_link,
    parse_wiki_link,
)


@pytest.fixture
def parser():
    return LinkParser()


@pytest.mark.parametrize(
    "text,matches,links",
    [
        ("[[link]]", ["[[link]]"], ["link.wiki"]),
        ("[[a]]\n[[b]]", ["[[a]]", "[[b]]"], ["a.wiki", "b.wiki"]),
        ("[[link|description]]", ["[[link|description]]"], ["link.wiki"]),
        ("[[link.wiki]]", ["[[link.wiki]]"], ["link.wiki"]),
        ("[[link.md]]", ["[[link.md]]"], ["link.md"]),
    ],
)
def test_wiki_links(parser, text, matches, links):
    """Test matching and parsing of vimwiki links."""
    found = parser.wiki_links(text)
    assert found == matches
    assert [parse_wiki_link(m) for m in found] == links


@pytest.mark.parametrize(
    "text,matches,links",
    [
        ("[link](url)", ["[link](url)"], ["url.md"]),
        ("[link](url.md)", ["[link](url.md)"], ["url.md"]),
        ("[link](vimwiki.wiki)", ["[link](vimwiki.wiki)"], ["vimwiki.wiki"]),
        ("![figure](image.png)", ["[figure](image.png)"], [""]),
    ],
)
def test_markdown_links(parser, text, matches, links):
    """Test matching and parsing of markdown links."""
    found = parser.markdown_links(text)
    assert found == matches
    assert [parse_markdown_link(m) for m in found] == links


def test_wiki_link_description_is_ignored():
    """Test that [[x|desc]] parses exactly like [[x]]."""
    assert parse_wiki_link("[[notes/todo|My TODO list]]") == parse_wiki_link("[[notes/todo]]")
    assert parse_wiki_link("[[notes/todo|]]") == "notes/todo.wiki"


def test_wiki_link_empty():
    """Test that an empty wiki link does not crash."""
    assert parse_wiki_link("[[]]") == ".wiki"


def test_wiki_link_unknown_extension_gets_wiki():
    """Test that only .md and .wiki count as document extensions."""
    assert parse_wiki_link("[[notes.txt]]") == "notes.txt.wiki"
    assert parse_wiki_link("[[v1.2/changes]]") == "v1.2/changes.wiki"


def test_markdown_link_relative_paths():
    """Test that relative segments are kept for the resolver."""
    assert parse_markdown_link("[up](../index)") == "../index.md"
    assert parse_markdown_link("[here](./todo.wiki)") == "./todo.wiki"


def test_multiple_markdown_links_on_one_line(parser):
    """Test that every markdown link on a line is matched separately."""
    text = "See [a](first) and [b](second.wiki), not [c](photo.jpg)."
    assert parser.markdown_links(text) == [
        "[a](first)",
        "[b](second.wiki)",
        "[c](photo.jpg)",
    ]
    assert parser.links(text) == ["first.md", "second.wiki"]


def test_links_combines_both_syntaxes(parser):
    """Test that wiki links come first, then markdown links."""
    text = "[md](readme) then [[wiki]] and ![img](pic.png)"
    assert parser.links(text) == ["wiki.wiki", "readme.md"]


def test_links_drops_images(parser):
    """Test that image embeds never produce a link."""
    assert parser.links("![diagram](assets/graph.svg)") == []


def test_no_links(parser):
    """Test plain text."""
    assert parser.links("Just some [text] and (parens).") == []
