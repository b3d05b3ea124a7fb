from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Optional

from pydantic import ValidationError

from emoji_compact.core.codec import SKIN_TONE_MODIFIERS, strip_skin_tone_token
from emoji_compact.core.dataset import INDEX_PATH, RAW_DATA_PATH, load_raw_records, save_index
from emoji_compact.core.records import CategoryIndex, CompactEmoji, RawEmojiRecord


@dataclass(frozen=True)
class TransformResult:
    index: CategoryIndex
    total: int
    skipped: int


@dataclass(frozen=True)
class SizeReport:
    original_bytes: int
    compact_bytes: int

    @property
    def reduction_percent(self) -> float:
        if self.original_bytes <= 0:
            return 0.0
        return (self.original_bytes - self.compact_bytes) / self.original_bytes * 100

    def describe(self) -> str:
        return (
            f"Original: {format_file_size(self.original_bytes)} -> "
            f"Compact: {format_file_size(self.compact_bytes)} "
            f"({self.reduction_percent:.2f}% reduction)"
        )


@dataclass(frozen=True)
class CleanReport:
    result: TransformResult
    sizes: SizeReport


def format_file_size(size: int) -> str:
    if size < 1024 * 1024:
        return f"{size / 1024:.2f}KB"
    return f"{size / 1024 / 1024:.2f}MB"


def _name_key(name: str) -> str:
    return " ".join(name.lower().split())


def build_names(name: str, short_names: Iterable[str]) -> tuple[str, ...]:
    names = [name.lower()]
    seen = {_name_key(name)}
    for short_name in short_names:
        formatted = short_name.lower().replace("_", " ")
        key = _name_key(formatted)
        if key in seen:
            continue
        seen.add(key)
        names.append(formatted)
    return tuple(names)


def collect_variants(record: RawEmojiRecord) -> Optional[tuple[str, ...]]:
    if not record.skin_variations:
        return None
    variants = [
        strip_skin_tone_token(record.unified, record.skin_variations[tone].unified)
        for tone in SKIN_TONE_MODIFIERS
        if tone in record.skin_variations
    ]
    return tuple(variants) or None


def compact_record(raw: Any) -> Optional[tuple[str, int, CompactEmoji]]:
    """Validate one raw entry and compact it.

    Returns ``(category, sort_order, emoji)`` or ``None`` when the entry is
    malformed or has no short names.
    """
    try:
        record = RawEmojiRecord.model_validate(raw)
    except ValidationError:
        return None
    if not record.short_names:
        return None

    emoji = CompactEmoji(
        names=build_names(record.name, record.short_names),
        unified=record.unified,
        variants=collect_variants(record),
    )
    return record.category, record.sort_order, emoji


def transform_records(raw_records: Iterable[Any]) -> TransformResult:
    grouped: dict[str, list[tuple[int, CompactEmoji]]] = {}
    total = 0
    skipped = 0

    for raw in raw_records:
        total += 1
        compacted = compact_record(raw)
        if compacted is None:
            skipped += 1
            continue
        category, sort_order, emoji = compacted
        grouped.setdefault(category, []).append((sort_order, emoji))

    categories: dict[str, tuple[CompactEmoji, ...]] = {}
    for category, entries in grouped.items():
        # sorted() is stable, so equal sort_order values keep their input order.
        ordered = sorted(entries, key=lambda entry: entry[0])
        categories[category] = tuple(emoji for _, emoji in ordered)

    return TransformResult(index=CategoryIndex(categories=categories), total=total, skipped=skipped)


def clean_dataset(raw_path: Path = RAW_DATA_PATH, output_path: Path = INDEX_PATH) -> CleanReport:
    raw_records = load_raw_records(raw_path)
    result = transform_records(raw_records)
    compact_bytes = save_index(result.index, output_path)
    sizes = SizeReport(original_bytes=raw_path.stat().st_size, compact_bytes=compact_bytes)
    return CleanReport(result=result, sizes=sizes)
