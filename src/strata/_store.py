"""File-backed, content-addressed container store for analysis results.

Layout under the store root::

    local/<container_id>.msgpack     one container per file
    indices/text_index.json          version, per-container checksum and keywords

Container ids are the FNV-1a 64-bit hash of the msgpack-encoded content,
so writing the same content twice yields the same container.
"""

from __future__ import annotations

import hashlib
import json
import logging
import threading
import time
from pathlib import Path
from typing import Any, Iterable

import msgpack

from ._errors import StrataChecksumError, StrataStoreError
from ._hash import fnv1a_u64
from ._types import SimilarDocument

logger = logging.getLogger(__name__)

INDEX_VERSION = "1.0"
_PREVIEW_KEYWORDS = 5


def _sha256(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def _jaccard(a: set[str], b: set[str]) -> float:
    union = a | b
    if not union:
        return 0.0
    return len(a & b) / len(union)


class ContainerStore:
    """Durable store reached through write/get/search."""

    __slots__ = ("_root", "_lock")

    def __init__(self, root: Path | str) -> None:
        self._root = Path(root)
        self._lock = threading.Lock()

    @property
    def root(self) -> Path:
        return self._root

    @property
    def _local_dir(self) -> Path:
        return self._root / "local"

    @property
    def _index_path(self) -> Path:
        return self._root / "indices" / "text_index.json"

    def _container_path(self, container_id: int) -> Path:
        return self._local_dir / f"{container_id}.msgpack"

    # -- Index --

    def _read_index(self) -> dict[str, Any]:
        if not self._index_path.exists():
            return {"version": INDEX_VERSION, "documents": []}
        try:
            with open(self._index_path, encoding="utf-8") as f:
                index = json.load(f)
        except (OSError, ValueError) as e:
            raise StrataStoreError(f"Unreadable index {self._index_path}: {e}") from e
        version = index.get("version")
        if version != INDEX_VERSION:
            raise StrataStoreError(
                f"Expected index version {INDEX_VERSION!r}, got {version!r}"
            )
        return index

    def _write_index(self, index: dict[str, Any]) -> None:
        self._index_path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._index_path.with_suffix(".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(index, f, indent=2)
        tmp.replace(self._index_path)

    # -- Public API --

    def write(self, content: dict[str, Any], container_type: str = "TextAnalysis") -> int:
        """Persist ``content`` and return its container id."""
        packed_content = msgpack.packb(content, use_bin_type=True)
        container_id = fnv1a_u64(packed_content)
        payload = msgpack.packb({
            "container_id": container_id,
            "container_type": container_type,
            "content": content,
            "created_at": int(time.time()),
        }, use_bin_type=True)

        entry = {
            "container_id": container_id,
            "container_type": container_type,
            "keywords": [
                k["keyword"] for k in content.get("keywords") or []
                if isinstance(k, dict) and "keyword" in k
            ],
            "word_count": content.get("word_count"),
            "language": content.get("language"),
            "sha256": _sha256(payload),
        }

        with self._lock:
            self._local_dir.mkdir(parents=True, exist_ok=True)
            path = self._container_path(container_id)
            tmp = path.with_suffix(".tmp")
            tmp.write_bytes(payload)
            tmp.replace(path)
            index = self._read_index()
            docs = [d for d in index["documents"] if d.get("container_id") != container_id]
            docs.append(entry)
            index["documents"] = docs
            self._write_index(index)

        logger.debug("Stored %s container %d", container_type, container_id)
        return container_id

    def get(self, container_id: int) -> dict[str, Any]:
        """Load a container, verifying it against the index checksum."""
        path = self._container_path(container_id)
        if not path.exists():
            raise StrataStoreError(f"Container {container_id} not found")

        with self._lock:
            index = self._read_index()
        expected = next(
            (d.get("sha256") for d in index["documents"]
             if d.get("container_id") == container_id),
            None,
        )
        if expected is None:
            raise StrataStoreError(f"No index entry for container {container_id}")

        data = path.read_bytes()
        actual = _sha256(data)
        if actual != expected:
            logger.warning("Checksum mismatch for container %d", container_id)
            raise StrataChecksumError(
                f"Checksum mismatch for container {container_id}: "
                f"expected {expected[:16]}..., got {actual[:16]}..."
            )
        return msgpack.unpackb(data, raw=False, strict_map_key=False)

    def search(self, keywords: Iterable[str], limit: int = 10) -> list[SimilarDocument]:
        """Rank indexed containers by keyword-set overlap with ``keywords``."""
        query = set(keywords)
        if not query:
            return []
        with self._lock:
            index = self._read_index()

        scored: list[SimilarDocument] = []
        for doc in index["documents"]:
            doc_keywords = doc.get("keywords") or []
            score = _jaccard(query, set(doc_keywords))
            if score > 0.0:
                scored.append(SimilarDocument(
                    container_id=doc["container_id"],
                    similarity_score=score,
                    preview=", ".join(doc_keywords[:_PREVIEW_KEYWORDS]),
                ))
        scored.sort(key=lambda d: d.similarity_score, reverse=True)
        return scored[:limit]
