import json
import random
from pathlib import Path

import pytest

from emoji_compact.core.lookup import EmojiLookup
from emoji_compact.core.records import CategoryIndex
from emoji_compact.core.transform import transform_records

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def raw_path() -> Path:
    return FIXTURES_DIR / "raw_emoji_sample.json"


@pytest.fixture
def expected_index_path() -> Path:
    return FIXTURES_DIR / "expected_index.json"


@pytest.fixture
def raw_records(raw_path: Path) -> list:
    return json.loads(raw_path.read_text(encoding="utf-8"))


@pytest.fixture
def sample_index(raw_records: list) -> CategoryIndex:
    return transform_records(raw_records).index


@pytest.fixture
def lookup(sample_index: CategoryIndex) -> EmojiLookup:
    return EmojiLookup(sample_index, rng=random.Random(123))
