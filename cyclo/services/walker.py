import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from cyclo.config import HIDDEN_PREFIX, SUPPORTED_EXTENSIONS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WalkEntry:
    path: Path
    # Directory levels below the analysis root; a file directly inside the
    # root has depth 1, the root itself depth 0.
    depth: int


def is_hidden(name: str) -> bool:
    return name.startswith(HIDDEN_PREFIX)


def is_file_extension_valid(name: str) -> bool:
    return name.endswith(SUPPORTED_EXTENSIONS)


def walk_entries(root: Path) -> Iterator[WalkEntry]:
    """
    Lazily yield every recognized source file under ``root``, depth-first.

    Hidden entries are skipped, and a hidden directory takes its whole
    subtree with it. The root itself is exempt from the hidden check so that
    ``.`` can be analyzed.
    """
    root = Path(root).resolve()

    if root.is_file():
        if is_file_extension_valid(root.name):
            yield WalkEntry(path=root, depth=0)
        return

    def _on_error(exc: OSError) -> None:
        logger.warning("Skipping unreadable directory %s: %s", exc.filename, exc.strerror)

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
        # Must modify dirnames in-place to prune traversal.
        dirnames[:] = sorted(d for d in dirnames if not is_hidden(d))

        current = Path(dirpath)
        depth = len(current.relative_to(root).parts) + 1

        for name in sorted(filenames):
            if is_hidden(name) or not is_file_extension_valid(name):
                continue
            path = current / name
            # FIFOs, sockets and devices would block or fail on open().
            if not path.is_file():
                continue
            yield WalkEntry(path=path, depth=depth)
