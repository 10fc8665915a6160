"""JSON flat-file helpers shared by the repositories."""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, Callable

logger = logging.getLogger(__name__)


def load_json(path: Path, default_factory: Callable[[], Any]) -> Any:
    """Read a JSON document; a missing or corrupt file yields ``default_factory()``."""
    if not os.path.exists(path):
        return default_factory()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
        logger.error("Unreadable data file %s: %s", path, e)
        return default_factory()
    return data if data is not None else default_factory()


def atomic_write(path: Path, data: Any) -> None:
    """Write JSON through a temp file in the same directory, then move it in place."""
    os.makedirs(os.path.dirname(path), exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(
        dir=os.path.dirname(path), prefix=f".{Path(path).stem}_", suffix=".json"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            json.dump(data, tmp, indent=2, ensure_ascii=False)
        shutil.move(tmp_path, path)
    except OSError:
        logger.error("Failed to save %s", path)
        raise
    finally:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
