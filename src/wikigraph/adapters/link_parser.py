import re

from ..core.model import DOCUMENT_EXTS, MARKDOWN_EXT, WIKI_EXT
from ..core.paths import extension
from ..core.ports import LinkParserStrategy

# [[link]] or [[link|description]]
WIKI_LINK_RE = re.compile(r"\[\[[^\[\]]*\]\]")
# [description](link), also matches the tail of ![alt](image)
MARKDOWN_LINK_RE = re.compile(r"\[[^\[\]]*\]\([^()]*\)")


def parse_wiki_link(raw: str) -> str:
    """
    Extract the target file from a vimwiki link.

    ``[[file]]`` -> ``file.wiki``, ``[[file|Title]]`` -> ``file.wiki``,
    ``[[notes.md]]`` -> ``notes.md``.
    """
    link = raw.strip("[]")
    # the description is not part of the target
    link, _sep, _description = link.partition("|")
    if extension(link) not in DOCUMENT_EXTS:
        link += WIKI_EXT
    return link


def parse_markdown_link(raw: str) -> str:
    """
    Extract the target file from a markdown link.

    Returns an empty string when the link points to anything other than a
    document (images, attachments).
    """
    link = raw[raw.index("("):].strip("()")
    ext = extension(link)
    if ext in DOCUMENT_EXTS:
        return link
    # bare name: a markdown note
    if ext == "":
        return link + MARKDOWN_EXT
    return ""


class LinkParser(LinkParserStrategy):
    def wiki_links(self, text: str) -> list[str]:
        return WIKI_LINK_RE.findall(text)

    def markdown_links(self, text: str) -> list[str]:
        return MARKDOWN_LINK_RE.findall(text)

    def links(self, text: str) -> list[str]:
        found = [parse_wiki_link(m) for m in self.wiki_links(text)]
        for m in self.markdown_links(text):
            link = parse_markdown_link(m)
            if link:
                found.append(link)
        return found
