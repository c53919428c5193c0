import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Union

logger = logging.getLogger(__name__)


class Overlay:
    """
    Generated files keyed by their path relative to the repository root.

    An overlay is meant to be written on top of a repository: files it holds
    replace existing ones, everything else is left alone.
    """

    def __init__(self, files: Optional[Dict[str, str]] = None) -> None:
        self.files: Dict[str, str] = dict(files or {})

    def with_new_file(self, path: str, contents: str) -> "Overlay":
        if path in self.files:
            logger.warning(f"Overwriting generated file {path}")
        self.files[path] = contents
        return self

    def with_overlay(self, other: "Overlay") -> "Overlay":
        for path, contents in other.files.items():
            self.with_new_file(path, contents)
        return self

    def export(self, root: Union[str, Path]) -> List[Path]:
        """Write every file under `root`, creating directories as needed.

        Returns:
            List[Path]: The written files, in insertion order.
        """
        written = []
        for path, contents in self.files.items():
            target = Path(root) / path
            target.parent.mkdir(parents=True, exist_ok=True)
            with open(target, "w", encoding="utf-8") as f:
                f.write(contents)
            logger.debug(f"Wrote {target}")
            written.append(target)
        return written

    def __getitem__(self, path: str) -> str:
        return self.files[path]

    def __contains__(self, path: str) -> bool:
        return path in self.files

    def __iter__(self) -> Iterator[str]:
        return iter(self.files)

    def __len__(self) -> int:
        return len(self.files)
