"""Text normalization shared by all extractors.

Two views of the same OCR text are produced: a flat one with every run of
whitespace collapsed to a single space (unit-based matching), and a
line-preserving one where each non-empty line is a candidate record
(prescription parsing). Both go through the same character mapping so the
patterns downstream only need one spelling of quotes, dashes and micro.
"""

from __future__ import annotations

import re

_CHAR_MAP = str.maketrans(
    {
        "“": '"',  # left double quote
        "”": '"',
        "„": '"',
        "‘": '"',
        "’": '"',
        "«": '"',
        "»": '"',
        "‐": "-",
        "‑": "-",
        "‒": "-",
        "–": "-",  # en dash
        "—": "-",  # em dash
        "―": "-",
        "−": "-",  # minus sign
        "µ": "μ",  # micro sign -> greek mu
    }
)

_WHITESPACE = re.compile(r"\s+")
_INLINE_WHITESPACE = re.compile(r"[^\S\n]+")
_NON_TEXT = re.compile(r"[^\w\s\-.,:()/%°]")


def canonicalize_chars(text: str) -> str:
    return text.translate(_CHAR_MAP)


def normalize_text(text: str) -> str:
    """Collapse all whitespace, newlines included, to single spaces."""
    if not text:
        return ""
    return _WHITESPACE.sub(" ", canonicalize_chars(text)).strip()


def normalize_lines(text: str) -> list[str]:
    """Line-preserving variant: one normalized entry per non-empty line."""
    if not text:
        return []
    text = canonicalize_chars(text).replace("\r\n", "\n").replace("\r", "\n")
    lines = (_INLINE_WHITESPACE.sub(" ", line).strip() for line in text.split("\n"))
    return [line for line in lines if line]


def clean_ocr_text(text: str) -> str:
    """Strip OCR noise: drop stray symbols and empty lines, keep line breaks."""
    cleaned = (
        _INLINE_WHITESPACE.sub(" ", _NON_TEXT.sub("", line)).strip()
        for line in normalize_lines(text)
    )
    return "\n".join(line for line in cleaned if line)
