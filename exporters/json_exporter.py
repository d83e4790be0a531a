"""JSON exporter for run reports (machine-friendly format)."""

import json
from pathlib import Path
from typing import Optional, Dict, List, Any

from report.model import RunReport, FAILED


def to_json(
    report: RunReport,
    base: Optional[Path] = None,
    indent: int = 2,
) -> str:
    """
    Convert a run report to JSON format.
    
    Args:
        report: The run report to export.
        base: Optional base path for relative path display.
        indent: JSON indentation level.
    
    Returns:
        JSON string with a "files" list and a "summary" object.
    """
    files: List[Dict[str, Any]] = []
    for path, status in report.iter_outcomes():
        entry: Dict[str, Any] = {"path": _get_path_str(path, base), "status": status}
        if status == FAILED:
            entry["error"] = report.failed[path]
        files.append(entry)
    
    data: Dict[str, Any] = {
        "files": files,
        "summary": {
            "modified": len(report.modified),
            "unchanged": len(report.unchanged),
            "failed": len(report.failed),
        },
    }
    
    return json.dumps(data, indent=indent)


def _get_path_str(path: Path, base: Optional[Path]) -> str:
    """Get the string representation of a path."""
    if base is None:
        return str(path).replace("\\", "/")
    try:
        rel_path = path.resolve().relative_to(base.resolve())
        return str(rel_path).replace("\\", "/")
    except ValueError:
        return str(path).replace("\\", "/")
