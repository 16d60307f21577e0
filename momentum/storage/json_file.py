"""JSONL file storage backend.

One ``<key>.jsonl`` file per collection. Writes go to a temp file that is
renamed over the target, so a reader sees either the old or the new
collection, never a mix.
"""

import asyncio
import fcntl
import hashlib
import json
from pathlib import Path
from typing import Dict, List, Optional

from loguru import logger

from momentum.errors import StorageUnavailableError
from momentum.storage.base import Record, StorageBackend


class JsonFileStorage(StorageBackend):
    """File-backed collections under ``base_path``."""

    def __init__(self, base_path: Path):
        self.base_path = Path(base_path).expanduser()
        self._etags: Dict[str, str] = {}

    def _compute_etag(self, content: str) -> str:
        """Compute ETag (hash) for content."""
        return hashlib.sha256(content.encode()).hexdigest()[:16]

    def _get_path(self, key: str) -> Path:
        safe_key = key.replace(":", "_").replace("/", "_")
        return self.base_path / f"{safe_key}.jsonl"

    def etag(self, key: str) -> Optional[str]:
        """ETag of the content last read or written for ``key``."""
        return self._etags.get(key)

    def _read(self, key: str) -> List[Record]:
        path = self._get_path(key)
        if not path.exists():
            return []

        try:
            with open(path, "r", encoding="utf-8") as f:
                fcntl.flock(f.fileno(), fcntl.LOCK_SH)
                content = f.read()
                fcntl.flock(f.fileno(), fcntl.LOCK_UN)

            items = [json.loads(line) for line in content.splitlines() if line.strip()]
        except (OSError, ValueError) as e:
            logger.error(f"Error reading {key}: {e}")
            raise StorageUnavailableError(f"Could not read collection '{key}': {e}", key=key) from e

        self._etags[key] = self._compute_etag(content)
        return items

    def _write(self, key: str, items: List[Record]) -> None:
        path = self._get_path(key)
        lines = [json.dumps(item, ensure_ascii=False, default=str) for item in items]
        content = "\n".join(lines) + "\n" if lines else ""

        try:
            self.base_path.mkdir(parents=True, exist_ok=True)
            temp_path = path.with_suffix(".tmp")
            with open(temp_path, "w", encoding="utf-8") as f:
                fcntl.flock(f.fileno(), fcntl.LOCK_EX)
                f.write(content)
                fcntl.flock(f.fileno(), fcntl.LOCK_UN)
            temp_path.replace(path)
        except OSError as e:
            logger.error(f"Error writing {key}: {e}")
            raise StorageUnavailableError(f"Could not write collection '{key}': {e}", key=key) from e

        self._etags[key] = self._compute_etag(content)
        logger.debug(f"Wrote {len(items)} records to {path}")

    async def load_collection(self, key: str) -> List[Record]:
        return await asyncio.to_thread(self._read, key)

    async def save_collection(self, key: str, items: List[Record]) -> None:
        await asyncio.to_thread(self._write, key, items)
