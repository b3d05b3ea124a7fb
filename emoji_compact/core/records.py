from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class SkinVariation(BaseModel):
    model_config = ConfigDict(extra="ignore")

    unified: str


class RawEmojiRecord(BaseModel):
    """One entry of the raw emoji dataset, as published by emoji-datasource."""

    model_config = ConfigDict(extra="ignore")

    name: str
    unified: str
    category: str
    sort_order: int
    short_names: list[str] = Field(default_factory=list)
    skin_variations: Optional[dict[str, SkinVariation]] = None


@dataclass(frozen=True)
class CompactEmoji:
    names: tuple[str, ...]
    unified: str
    variants: Optional[tuple[str, ...]] = None

    def __post_init__(self) -> None:
        if not self.names:
            raise ValueError(f"Emoji {self.unified} has no names")
        if self.variants is not None and not self.variants:
            raise ValueError(f"Emoji {self.unified} has an empty variants list")

    @property
    def name(self) -> str:
        return self.names[0]

    def to_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {"n": list(self.names), "u": self.unified}
        if self.variants:
            data["v"] = list(self.variants)
        return data

    @classmethod
    def from_json(cls, payload: Any) -> "CompactEmoji":
        if not isinstance(payload, Mapping):
            raise ValueError(f"Emoji record must be a JSON object: {payload!r}")
        names = payload.get("n")
        unified = payload.get("u")
        variants = payload.get("v")
        if not isinstance(names, list) or not all(isinstance(name, str) for name in names):
            raise ValueError(f"Emoji record names must be a list of strings: {payload!r}")
        if not isinstance(unified, str):
            raise ValueError(f"Emoji record codepoint must be a string: {payload!r}")
        if variants is not None and (
            not isinstance(variants, list) or not all(isinstance(variant, str) for variant in variants)
        ):
            raise ValueError(f"Emoji record variants must be a list of strings: {payload!r}")
        return cls(
            names=tuple(names),
            unified=unified,
            variants=tuple(variants) if variants else None,
        )


@dataclass(frozen=True)
class CategoryIndex:
    """Category name to emoji records, in stored order. Read-only once built."""

    categories: Mapping[str, tuple[CompactEmoji, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = {name: tuple(emojis) for name, emojis in self.categories.items()}
        object.__setattr__(self, "categories", MappingProxyType(frozen))

    def __contains__(self, category: object) -> bool:
        return category in self.categories

    def __iter__(self) -> Iterator[str]:
        return iter(self.categories)

    def __len__(self) -> int:
        return len(self.categories)

    def get(self, category: str) -> tuple[CompactEmoji, ...]:
        if category not in self.categories:
            return ()
        return self.categories[category]

    def items(self):
        return self.categories.items()

    def to_json(self) -> dict[str, list[dict[str, Any]]]:
        return {name: [emoji.to_json() for emoji in emojis] for name, emojis in self.categories.items()}

    @classmethod
    def from_json(cls, payload: Mapping[str, Any]) -> "CategoryIndex":
        if not isinstance(payload, Mapping) or not all(isinstance(emojis, list) for emojis in payload.values()):
            raise ValueError("Emoji index must be a JSON object of category arrays")
        return cls(
            categories={
                name: tuple(CompactEmoji.from_json(item) for item in emojis)
                for name, emojis in payload.items()
            }
        )
