from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Optional

from emoji_compact.core.dataset import INDEX_PATH, TYPES_PATH, load_index
from emoji_compact.core.records import CategoryIndex

HEADER = '''"""Type definitions for the compact emoji data.

AUTOMATICALLY GENERATED - DO NOT EDIT MANUALLY
Generated on: {generated_on}

Each record is stored with short keys to keep the data file small:
- n: names, the full name first, followed by short names
- u: unified codepoint token, e.g. "1F44C"
- v: optional skin tone variants in light, medium-light, medium,
  medium-dark, dark order; a bare modifier such as "1F3FB" implies the
  base codepoint from "u"
"""

from __future__ import annotations

from typing import List, Literal, TypedDict
'''


def quote_literal(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    escaped = escaped.replace("\n", "\\n").replace("\r", "\\r")
    return f"'{escaped}'"


def render_type_module(categories: Iterable[str], generated_on: Optional[datetime] = None) -> str:
    categories = list(categories)
    generated_on = generated_on or datetime.now(timezone.utc)

    lines = [HEADER.format(generated_on=generated_on.isoformat()), ""]
    lines.append("class _CompactEmojiRequired(TypedDict):")
    lines.append("    n: List[str]")
    lines.append("    u: str")
    lines.append("")
    lines.append("")
    lines.append("class CompactEmojiRecord(_CompactEmojiRequired, total=False):")
    lines.append("    v: List[str]")
    lines.append("")
    lines.append("")

    if categories:
        lines.append("EmojiCategory = Literal[")
        lines.extend(f"    {quote_literal(category)}," for category in categories)
        lines.append("]")
    else:
        lines.append("EmojiCategory = str")
    lines.append("")
    lines.append("EmojiCategories = TypedDict(")
    lines.append("    'EmojiCategories',")
    lines.append("    {")
    lines.extend(f"        {quote_literal(category)}: List[CompactEmojiRecord]," for category in categories)
    lines.append("    },")
    lines.append(")")
    lines.append("")
    return "\n".join(lines)


def reflect_index(index: CategoryIndex, generated_on: Optional[datetime] = None) -> str:
    return render_type_module(index, generated_on)


def generate_type_definitions(
    index_path: Path = INDEX_PATH,
    output_path: Path = TYPES_PATH,
    generated_on: Optional[datetime] = None,
) -> list[str]:
    index = load_index(index_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(reflect_index(index, generated_on), encoding="utf-8")
    return list(index)
