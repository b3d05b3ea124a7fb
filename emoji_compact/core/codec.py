from __future__ import annotations

import re

SKIN_TONE_MODIFIERS = ("1F3FB", "1F3FC", "1F3FD", "1F3FE", "1F3FF")
SKIN_TONE_NAMES = ("light", "medium-light", "medium", "medium-dark", "dark")

LEGACY_VARIANT_PREFIX = "u-"

_HEX_CODEPOINT = re.compile(r"[0-9A-Fa-f]{1,6}")
_MAX_CODEPOINT = 0x10FFFF
_SURROGATES = range(0xD800, 0xE000)


class CodecError(ValueError):
    """Raised when a codepoint token cannot be decoded into characters."""


def _parse_codepoint(part: str, token: str) -> int:
    if not _HEX_CODEPOINT.fullmatch(part):
        raise CodecError(f"Invalid codepoint {part!r} in token {token!r}")
    value = int(part, 16)
    if value > _MAX_CODEPOINT or value in _SURROGATES:
        raise CodecError(f"Codepoint {part!r} in token {token!r} is not a Unicode scalar value")
    return value


def unicode_to_character(token: str) -> str:
    return "".join(chr(_parse_codepoint(part, token)) for part in token.split("-"))


def is_skin_tone_modifier(token: str) -> bool:
    return token.upper() in SKIN_TONE_MODIFIERS


def compose_skin_tone_token(base: str, variant: str) -> str:
    if variant.startswith(LEGACY_VARIANT_PREFIX):
        variant = variant[len(LEGACY_VARIANT_PREFIX) :]
    if is_skin_tone_modifier(variant):
        return f"{base}-{variant}"
    return variant


def strip_skin_tone_token(base: str, variant: str) -> str:
    # Only a plain "base-modifier" sequence can be stored as the bare modifier.
    prefix = f"{base}-"
    if variant.startswith(prefix) and is_skin_tone_modifier(variant[len(prefix) :]):
        return variant[len(prefix) :]
    return variant
