from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any

from emoji_compact.core.records import CategoryIndex

DATA_DIR = Path(__file__).resolve().parents[2] / "data"
RAW_DATA_PATH = DATA_DIR / "RawEmojiData.json"
INDEX_PATH = DATA_DIR / "EmojiData.json"
TYPES_PATH = DATA_DIR / "emoji_types.py"


def load_raw_records(path: Path = RAW_DATA_PATH) -> list[dict[str, Any]]:
    if not path.exists():
        raise FileNotFoundError(f"Missing raw emoji data: {path}")

    with path.open("r", encoding="utf-8") as f:
        records = json.load(f)

    if not isinstance(records, list):
        raise ValueError(f"Raw emoji data must be a JSON array: {path}")
    return records


def dump_index(index: CategoryIndex) -> bytes:
    return json.dumps(index.to_json(), ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def save_index(index: CategoryIndex, path: Path = INDEX_PATH) -> int:
    payload = dump_index(index)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(payload)
    return len(payload)


def load_index(path: Path = INDEX_PATH) -> CategoryIndex:
    if not path.exists():
        raise FileNotFoundError(f"Missing emoji index: {path}")

    with path.open("r", encoding="utf-8") as f:
        payload = json.load(f)

    return CategoryIndex.from_json(payload)


def index_digest(index: CategoryIndex) -> str:
    hasher = hashlib.blake2b(digest_size=16)
    hasher.update(dump_index(index))
    return hasher.hexdigest()
