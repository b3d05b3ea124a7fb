from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request

from emoji_compact.api.schemas import (
    CategoryPayload,
    CountPayload,
    EmojiPayload,
    RenderPayload,
    SearchPayload,
    SkinTonePayload,
)
from emoji_compact.core.codec import CodecError, unicode_to_character
from emoji_compact.core.lookup import EmojiLookup

router = APIRouter(prefix="/api")

CORRUPT_DATA_DETAIL = "Corrupted emoji data"


def get_lookup(request: Request) -> EmojiLookup:
    return request.app.state.lookup


@router.get("/categories", response_model=list[CategoryPayload])
async def list_categories(lookup: EmojiLookup = Depends(get_lookup)) -> list[CategoryPayload]:
    return [
        CategoryPayload(name=category, count=len(lookup.list_by_category(category)))
        for category in lookup.list_categories()
    ]


@router.get("/categories/{category}", response_model=list[EmojiPayload])
async def list_category(category: str, lookup: EmojiLookup = Depends(get_lookup)) -> list[EmojiPayload]:
    try:
        return [EmojiPayload.from_emoji(emoji, category) for emoji in lookup.list_by_category(category)]
    except CodecError as exc:
        raise HTTPException(status_code=500, detail=CORRUPT_DATA_DETAIL) from exc


@router.get("/search", response_model=SearchPayload)
async def search(q: str, all: int = 0, lookup: EmojiLookup = Depends(get_lookup)) -> SearchPayload:
    term = q.strip().lower()
    if not term:
        raise HTTPException(status_code=400, detail="Empty search term.")

    try:
        if all:
            results = [EmojiPayload.from_emoji(match.emoji, match.category) for match in lookup.find_all_by_name(term)]
        else:
            first = lookup.find_first_by_name(term)
            if first is None:
                raise HTTPException(status_code=404, detail=f"No emoji matches {q!r}")
            results = [EmojiPayload.from_emoji(first)]
    except CodecError as exc:
        raise HTTPException(status_code=500, detail=CORRUPT_DATA_DETAIL) from exc

    return SearchPayload(term=term, results=results)


@router.get("/random", response_model=EmojiPayload)
async def random_emoji(lookup: EmojiLookup = Depends(get_lookup)) -> EmojiPayload:
    emoji = lookup.pick_random()
    if emoji is None:
        raise HTTPException(status_code=404, detail="Emoji index is empty")
    try:
        return EmojiPayload.from_emoji(emoji)
    except CodecError as exc:
        raise HTTPException(status_code=500, detail=CORRUPT_DATA_DETAIL) from exc


@router.get("/count", response_model=CountPayload)
async def count(lookup: EmojiLookup = Depends(get_lookup)) -> CountPayload:
    return CountPayload(total=lookup.total_count(), categories=len(lookup.list_categories()))


@router.get("/render/{token}", response_model=RenderPayload)
async def render(token: str) -> RenderPayload:
    try:
        character = unicode_to_character(token)
    except CodecError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return RenderPayload(token=token, character=character)


@router.get("/skin-tones/{unified}", response_model=SkinTonePayload)
async def skin_tones(unified: str, lookup: EmojiLookup = Depends(get_lookup)) -> SkinTonePayload:
    emoji = lookup.find_by_unified(unified)
    if emoji is None:
        raise HTTPException(status_code=404, detail=f"Unknown emoji {unified}")
    try:
        tones = lookup.render_all_skin_tones(emoji)
    except CodecError as exc:
        raise HTTPException(status_code=500, detail=CORRUPT_DATA_DETAIL) from exc
    if tones is None:
        raise HTTPException(status_code=404, detail=f"Emoji {unified} has no skin tone variants")
    return SkinTonePayload(unified=emoji.unified, tones=tones)
