"""Plain-text exporter for run reports."""

from pathlib import Path
from typing import List, Optional

from report.model import RunReport, MODIFIED, UNCHANGED


# Status markers per outcome
MARKERS = {
    MODIFIED: "M",
    UNCHANGED: "-",
}
FAILED_MARKER = "!"


def to_text(
    report: RunReport,
    base: Optional[Path] = None,
    show_unchanged: bool = False,
) -> str:
    """
    Convert a run report to a human-readable listing.
    
    Args:
        report: The run report to export.
        base: Optional base path for relative path display.
        show_unchanged: If True, list files that needed no change.
    
    Returns:
        One line per file followed by a summary line.
    """
    lines: List[str] = []
    for path, status in report.iter_outcomes():
        if status == UNCHANGED and not show_unchanged:
            continue
        marker = MARKERS.get(status, FAILED_MARKER)
        line = f"{marker} {_get_path_str(path, base)}"
        if marker == FAILED_MARKER:
            line += f": {report.failed[path]}"
        lines.append(line)
    
    lines.append(
        f"{len(report.modified)} modified, "
        f"{len(report.unchanged)} unchanged, "
        f"{len(report.failed)} failed"
    )
    return "\n".join(lines)


def _get_path_str(path: Path, base: Optional[Path]) -> str:
    """Get the display string for a path."""
    if base is not None:
        try:
            return str(path.resolve().relative_to(base.resolve())).replace("\\", "/")
        except ValueError:
            pass
    return str(path).replace("\\", "/")
