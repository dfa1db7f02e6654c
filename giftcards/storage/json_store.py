import contextlib
import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Sequence

log = logging.getLogger(__name__)

NEW_FILE_MODE = 0o644


class JsonStore:
    """Whole-collection JSON-on-disk store: one file holding one array of records.

    Every read loads the full array and every write replaces the full file,
    so the store is only meant for a small catalog with a single writer.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def load_all(self) -> List[Dict[str, Any]]:
        """Return every record, or [] when the file is missing or unreadable."""
        if not self.path.exists():
            return []
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            log.warning("Could not read %s, treating it as empty: %s", self.path, e)
            return []
        if not isinstance(data, list):
            log.warning("%s does not hold a JSON array, treating it as empty", self.path)
            return []
        return data

    def save_all(self, records: Sequence[Dict[str, Any]]) -> bool:
        """Overwrite the file with ``records``. Returns False instead of raising."""
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(list(records), f, indent=2, ensure_ascii=False)
            # mkstemp creates 0600; keep the mode the catalog file already had
            mode = stat.S_IMODE(self.path.stat().st_mode) if self.path.exists() else NEW_FILE_MODE
            os.chmod(tmp_name, mode)
            os.replace(tmp_name, self.path)
            return True
        except (OSError, TypeError, ValueError):
            log.exception("Failed to write %s", self.path)
            if tmp_name:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)
            return False
