"""Utilities for generating filesystem-safe export file names."""

import re
from typing import Optional

SLUG_INVALID = re.compile(r"[^a-z0-9]+")

# Bulgarian Cyrillic to Latin (streamlined system)
_TRANSLIT = str.maketrans({
    "а": "a", "б": "b", "в": "v", "г": "g", "д": "d", "е": "e", "ж": "zh",
    "з": "z", "и": "i", "й": "y", "к": "k", "л": "l", "м": "m", "н": "n",
    "о": "o", "п": "p", "р": "r", "с": "s", "т": "t", "у": "u", "ф": "f",
    "х": "h", "ц": "ts", "ч": "ch", "ш": "sh", "щ": "sht", "ъ": "a",
    "ь": "y", "ю": "yu", "я": "ya",
})


def slugify(text: str, default: Optional[str] = None) -> str:
    """Convert text to a lowercase slug composed of a-z, 0-9 and hyphen."""
    text = (text or "").strip().lower().translate(_TRANSLIT)
    if not text:
        if default:
            text = default.strip().lower()
        else:
            raise ValueError("Cannot slugify empty text")

    text = SLUG_INVALID.sub("-", text).strip("-")
    return text or (default or "report")


def pdf_filename(filename: Optional[str], title: str = "") -> str:
    """File name for a PDF download; ``.pdf`` is appended when missing."""
    name = (filename or "").strip() or slugify(title, default="spesti-report")
    if not name.lower().endswith(".pdf"):
        name = f"{name}.pdf"
    return name
