from __future__ import annotations

from pathlib import Path
from typing import Optional

from fastapi import FastAPI

from emoji_compact.api.routes import router as api_router
from emoji_compact.core.dataset import INDEX_PATH, load_index
from emoji_compact.core.lookup import EmojiLookup


def create_app(lookup: Optional[EmojiLookup] = None, index_path: Path = INDEX_PATH) -> FastAPI:
    if lookup is None:
        lookup = EmojiLookup(load_index(index_path))

    app = FastAPI(title="Emoji Lookup")
    app.state.lookup = lookup
    app.include_router(api_router)
    return app
