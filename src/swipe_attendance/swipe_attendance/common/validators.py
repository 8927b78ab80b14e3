from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..core.exceptions import ValidationError


def clean_cell(value: Any) -> str:
    """Trim a cell value; ``None`` and empty cells become ``""``."""
    if value is None:
        return ""
    return str(value).strip()


def require_columns(rows: Sequence[Mapping[str, Any]], columns: Sequence[str]) -> None:
    if not rows:
        raise ValidationError("No data rows found")

    available = {str(k).lower() for k in rows[0].keys()}
    missing = [c for c in columns if c.lower() not in available]
    if missing:
        raise ValidationError(f"Missing required columns: {', '.join(missing)}")
