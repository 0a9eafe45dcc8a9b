"""Output file writing (JSON)."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from pydantic import BaseModel


def to_jsonable(result: BaseModel | list[BaseModel]) -> Any:
    """Dump a model or list of models using wire field names, omitting absent fields."""
    if isinstance(result, list):
        return [to_jsonable(item) for item in result]
    return result.model_dump(mode="json", by_alias=True, exclude_none=True)


def render_json(result: BaseModel | list[BaseModel]) -> str:
    """Pretty-printed JSON text for a result."""
    return json.dumps(to_jsonable(result), indent=2, ensure_ascii=False)


def write_result(result: BaseModel | list[BaseModel], dest: Path) -> Path:
    """Write a result as JSON. Returns the written file path."""
    dest = Path(dest)
    _atomic_write_json(dest, to_jsonable(result))
    return dest


def _atomic_write_json(dest: Path, data: Any) -> None:
    """Write JSON atomically: write to temp file, then rename."""
    dest.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(
        dir=dest.parent, suffix=".tmp", prefix=".holodex_"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, default=str, ensure_ascii=False)
            f.write("\n")
        os.replace(tmp_path, dest)
    except BaseException:
        os.unlink(tmp_path)
        raise
