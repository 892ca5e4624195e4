import logging
import os
from pathlib import Path
from typing import Callable, Iterable, Iterator

logger = logging.getLogger("wikigraph.walk")

DEFAULT_SKIP_DIRS = (".git",)


def _raise(err: OSError) -> None:
    logger.error("err %s: %s", err.filename, err.strerror or err)
    raise err


def walk_files(
    root: Path,
    skip_dirs: Iterable[str] = DEFAULT_SKIP_DIRS,
    ignore: Callable[[str], bool] | None = None,
) -> Iterator[Path]:
    """
    Yield every file below ``root`` in sorted order.

    Args:
        root: Directory to walk
        skip_dirs: Directory names that are not descended into
        ignore: Predicate on the file path; matching files are not yielded

    Raises:
        FileNotFoundError: If ``root`` does not exist
        NotADirectoryError: If ``root`` is a file
        OSError: On the first unreadable directory, after logging it
    """
    root = Path(root)
    if not root.exists():
        raise FileNotFoundError(f"Wiki root not found: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Wiki root is not a directory: {root}")
    skip = set(skip_dirs)

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
        kept = []
        for name in sorted(dirnames):
            if name in skip:
                logger.info("skipping: %s", name)
                continue
            kept.append(name)
        dirnames[:] = kept

        for name in sorted(filenames):
            path = Path(dirpath) / name
            if ignore is not None and ignore(str(path)):
                logger.debug("ignoring: %s", path)
                continue
            yield path
