"""Run report model for recording what happened to each processed file."""

from pathlib import Path
from typing import Dict, Iterator, List, Set, Tuple


MODIFIED = "modified"
UNCHANGED = "unchanged"
FAILED = "failed"


class RunReport:
    """
    Outcome of one run over a set of paths.

    Every path ends up in exactly one bucket: modified, unchanged, or failed.
    Failed paths keep the error message that was reported for them.
    """

    def __init__(self):
        self._modified: Set[Path] = set()
        self._unchanged: Set[Path] = set()
        self._failed: Dict[Path, str] = {}  # path -> error message

    @property
    def modified(self) -> Set[Path]:
        """Return paths whose content changed."""
        return self._modified.copy()

    @property
    def unchanged(self) -> Set[Path]:
        """Return paths that needed no change."""
        return self._unchanged.copy()

    @property
    def failed(self) -> Dict[Path, str]:
        """Return failed paths (path -> error message)."""
        return dict(self._failed)

    def add_modified(self, path: Path) -> None:
        """Record a path whose content changed."""
        self._discard(path)
        self._modified.add(path)

    def add_unchanged(self, path: Path) -> None:
        """Record a path that was read but not rewritten."""
        self._discard(path)
        self._unchanged.add(path)

    def add_failure(self, path: Path, message: str) -> None:
        """
        Record a failed path.

        Args:
            path: The path that could not be processed.
            message: The error as reported on stderr.
        """
        self._discard(path)
        self._failed[path] = message

    def has_failures(self) -> bool:
        """Check if any path failed."""
        return bool(self._failed)

    def status(self, path: Path) -> str:
        """Get the outcome recorded for a path."""
        if path in self._modified:
            return MODIFIED
        if path in self._unchanged:
            return UNCHANGED
        if path in self._failed:
            return FAILED
        raise KeyError(path)

    def iter_outcomes(self) -> Iterator[Tuple[Path, str]]:
        """Iterate over all (path, status) tuples, sorted by path."""
        for path in self.paths():
            yield path, self.status(path)

    def iter_failures(self) -> Iterator[Tuple[Path, str]]:
        """Iterate over failures as (path, message) tuples."""
        for path in sorted(self._failed):
            yield path, self._failed[path]

    def paths(self) -> List[Path]:
        """Return every recorded path, sorted."""
        return sorted(self._modified | self._unchanged | set(self._failed))

    def _discard(self, path: Path) -> None:
        self._modified.discard(path)
        self._unchanged.discard(path)
        self._failed.pop(path, None)

    def __len__(self) -> int:
        """Return the number of recorded paths."""
        return len(self._modified) + len(self._unchanged) + len(self._failed)

    def __contains__(self, path: Path) -> bool:
        """Check if a path has an outcome."""
        return path in self._modified or path in self._unchanged or path in self._failed

    def __repr__(self) -> str:
        return f"RunReport(modified={len(self._modified)}, unchanged={len(self._unchanged)}, failed={len(self._failed)})"
