"""Persistence of the generated data file."""

import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


def write_output(text: str, path: str | Path) -> Path:
    """Write ``text`` as UTF-8, replacing the whole file atomically."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with tempfile.NamedTemporaryFile(
        "w", encoding="utf-8", dir=path.parent, delete=False, suffix=".tmp"
    ) as temp_file:
        temp_path = Path(temp_file.name)
        try:
            temp_file.write(text)
        except Exception:
            temp_file.close()
            temp_path.unlink(missing_ok=True)
            raise

    os.replace(temp_path, path)
    logger.debug(f"Wrote {len(text)} characters to {path}")
    return path
