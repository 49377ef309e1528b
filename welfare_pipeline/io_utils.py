from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Iterable

from .models import Section


LOGGER = logging.getLogger(__name__)


def atomic_write_json(path: Path, payload: Any) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(prefix=path.stem, suffix=".tmp", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fp:
            json.dump(payload, fp, ensure_ascii=False, indent=2)
            fp.flush()
            os.fsync(fp.fileno())
        os.replace(tmp_path, path)
    finally:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)


def write_catalog(path: Path, sections: Iterable[Section]) -> int:
    payload = [section.to_dict() for section in sections]
    atomic_write_json(path, payload)
    LOGGER.info("Catalog with %s sections written to %s", len(payload), Path(path).as_posix())
    return len(payload)
