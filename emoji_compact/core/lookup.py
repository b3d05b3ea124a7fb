from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from emoji_compact.core.codec import SKIN_TONE_NAMES, compose_skin_tone_token, unicode_to_character
from emoji_compact.core.records import CategoryIndex, CompactEmoji


@dataclass(frozen=True)
class EmojiMatch:
    emoji: CompactEmoji
    category: str


def _matches(emoji: CompactEmoji, term: str) -> bool:
    return any(term in name.lower() for name in emoji.names)


def tone_label(position: int) -> str:
    if position < len(SKIN_TONE_NAMES):
        return SKIN_TONE_NAMES[position]
    return f"tone-{position + 1}"


class EmojiLookup:
    """Read-only queries over a loaded :class:`CategoryIndex`.

    Categories are scanned in stored order and records in stored order within
    each category, so the first match is always the same for a given index.
    Lookup misses return ``None`` or an empty sequence; a corrupt codepoint in
    stored data raises :class:`~emoji_compact.core.codec.CodecError`.
    """

    def __init__(self, index: CategoryIndex, rng: Optional[random.Random] = None) -> None:
        self._index = index
        self._rng = rng or random.Random()

    @property
    def index(self) -> CategoryIndex:
        return self._index

    def find_first_by_name(self, term: str) -> Optional[CompactEmoji]:
        term = term.lower()
        for _, emojis in self._index.items():
            for emoji in emojis:
                if _matches(emoji, term):
                    return emoji
        return None

    def find_all_by_name(self, term: str) -> list[EmojiMatch]:
        term = term.lower()
        return [
            EmojiMatch(emoji=emoji, category=category)
            for category, emojis in self._index.items()
            for emoji in emojis
            if _matches(emoji, term)
        ]

    def find_by_unified(self, unified: str) -> Optional[CompactEmoji]:
        unified = unified.upper()
        for _, emojis in self._index.items():
            for emoji in emojis:
                if emoji.unified.upper() == unified:
                    return emoji
        return None

    def list_by_category(self, category: str) -> tuple[CompactEmoji, ...]:
        return self._index.get(category)

    def list_categories(self) -> list[str]:
        return list(self._index)

    def pick_random(self) -> Optional[CompactEmoji]:
        # Category first, then record: each category is equally likely
        # regardless of its size.
        categories = [category for category, emojis in self._index.items() if emojis]
        if not categories:
            return None
        category = self._rng.choice(categories)
        return self._rng.choice(self._index.get(category))

    def total_count(self) -> int:
        return sum(len(emojis) for _, emojis in self._index.items())

    def render(self, token: str) -> str:
        return unicode_to_character(token)

    def render_skin_tone(self, emoji: CompactEmoji, tone_index: int) -> Optional[str]:
        if not emoji.variants or not 0 <= tone_index < len(emoji.variants):
            return None
        return unicode_to_character(compose_skin_tone_token(emoji.unified, emoji.variants[tone_index]))

    def render_all_skin_tones(self, emoji: CompactEmoji) -> Optional[dict[str, str]]:
        if not emoji.variants:
            return None
        return {
            tone_label(position): unicode_to_character(compose_skin_tone_token(emoji.unified, variant))
            for position, variant in enumerate(emoji.variants)
        }
