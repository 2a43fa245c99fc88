from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Iterator


def ensure_parent_dir(path: str | Path) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def load_json(path: str | Path, *, encoding: str = "utf-8") -> Any:
    with open(path, "r", encoding=encoding) as f:
        return json.load(f)


def write_jsonl(path: str | Path, rows: Iterable[dict[str, Any]], *, encoding: str = "utf-8") -> int:
    """Overwrite path with one JSON object per line. Returns rows written."""
    ensure_parent_dir(path)
    n = 0
    with open(path, "w", encoding=encoding) as f:
        for row in rows:
            f.write(json.dumps(row, ensure_ascii=False) + "\n")
            n += 1
    return n


def iter_jsonl(path: str | Path, *, encoding: str = "utf-8") -> Iterator[tuple[int, str]]:
    """Yield (line_no, raw_line) for every non-blank line, 1-based."""
    with open(path, "r", encoding=encoding) as f:
        for line_no, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            yield line_no, line


def write_lines(path: str | Path, lines: Iterable[str], *, encoding: str = "utf-8") -> None:
    ensure_parent_dir(path)
    with open(path, "w", encoding=encoding) as f:
        for line in lines:
            f.write(line + "\n")
