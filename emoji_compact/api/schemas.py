from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from emoji_compact.core.codec import unicode_to_character
from emoji_compact.core.records import CompactEmoji


class EmojiPayload(BaseModel):
    names: list[str]
    unified: str
    variants: Optional[list[str]] = None
    character: str
    category: Optional[str] = None

    @classmethod
    def from_emoji(cls, emoji: CompactEmoji, category: Optional[str] = None) -> "EmojiPayload":
        return cls(
            names=list(emoji.names),
            unified=emoji.unified,
            variants=list(emoji.variants) if emoji.variants else None,
            character=unicode_to_character(emoji.unified),
            category=category,
        )


class CategoryPayload(BaseModel):
    name: str
    count: int


class SearchPayload(BaseModel):
    term: str
    results: list[EmojiPayload] = Field(default_factory=list)


class CountPayload(BaseModel):
    total: int
    categories: int


class RenderPayload(BaseModel):
    token: str
    character: str


class SkinTonePayload(BaseModel):
    unified: str
    tones: dict[str, str]
