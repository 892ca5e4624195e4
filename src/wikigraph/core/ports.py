from pathlib import Path
from typing import Any, Callable, Iterable, Iterator, Protocol


class LinkParserStrategy(Protocol):
    """
    Extract link targets from a single line of text. Targets carry their
    resolved extension but are still relative to the linking document.
    """

    def links(self, text: str) -> list[str]:
        pass


class FileEnumerator(Protocol):
    """
    Lazily yield every file below ``root``, pruning directories named in
    ``skip_dirs`` and files for which ``ignore`` returns true.
    """

    def __call__(
        self,
        root: Path,
        skip_dirs: Iterable[str],
        ignore: Callable[[str], bool] | None = None,
    ) -> Iterator[Path]:
        pass


class GraphExporter(Protocol):
    def render(self, level: int = 0, cluster: bool = False) -> Any:
        pass
