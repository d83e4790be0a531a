"""Concurrent fan-out of file rewrites, one task per path."""

import sys
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Set, Union

from report.model import RunReport
from .errors import RewriteError
from .file import rewrite_file


def _print_error(path: Path, error: Exception) -> None:
    print(f"{path}: {error}", file=sys.stderr)


def process_paths(
    paths: Iterable[Union[str, Path]],
    write: bool = True,
    max_workers: Optional[int] = None,
    on_error: Optional[Callable[[Path, Exception], None]] = None,
) -> RunReport:
    """
    Rewrite every path concurrently and wait for all of them.

    A failure in one file is reported and recorded but never stops the
    other files from being processed.

    Args:
        paths: Files to process. Repeated paths are processed once.
        write: If False, files are checked but never written.
        max_workers: Upper bound on concurrent tasks. None starts one
                     task per path.
        on_error: Called with (path, error) for each failure.
                  Defaults to printing "<path>: <error>" to stderr.

    Returns:
        RunReport with one outcome per distinct path.
    """
    report = RunReport()
    if on_error is None:
        on_error = _print_error

    # Spellings of the same file (a.txt, ./a.txt, /abs/a.txt) run once
    unique: List[Path] = []
    seen: Set[Path] = set()
    for path in map(Path, paths):
        key = path.resolve()
        if key not in seen:
            seen.add(key)
            unique.append(path)
    if not unique:
        return report

    workers = max_workers if max_workers is not None else len(unique)
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="rewrite") as ex:
        futs = {ex.submit(rewrite_file, path, write): path for path in unique}
        for fut in as_completed(futs):
            path = futs[fut]
            try:
                changed = fut.result()
            except (OSError, RewriteError) as e:
                on_error(path, e)
                report.add_failure(path, str(e))
                continue
            if changed:
                report.add_modified(path)
            else:
                report.add_unchanged(path)

    return report
