"""
Text preparation: normalization, tokenization and character splitting.

Each side of a comparison becomes a `PreparedInput` holding the normalized
string, its tokens under the active granularity and its characters under the
active length mode. Preparation is a pure function of (text, options).
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Sequence as SequenceABC
from dataclasses import dataclass
from typing import List, Tuple

from .errors import InvalidArgumentError
from .options import Granularity, LengthMode, Options

_WHITESPACE_RE = re.compile(r"\s+")
# Letters and digits; everything else (including "_") separates words.
_WORD_RE = re.compile(r"[^\W_]+")

_ZWJ = "\u200d"


@dataclass(frozen=True)
class PreparedInput:
    normalized: str
    tokens: Tuple[str, ...]
    characters: Tuple[str, ...]


def _is_punctuation_or_symbol(char: str) -> bool:
    return unicodedata.category(char)[0] in ("P", "S")


def _strip_punctuation(text: str) -> str:
    out: List[str] = []
    in_run = False
    for char in text:
        if _is_punctuation_or_symbol(char):
            if not in_run:
                out.append(" ")
            in_run = True
        else:
            out.append(char)
            in_run = False
    return "".join(out)


def normalize_text(text: str, options: Options) -> str:
    """Case-fold, strip punctuation and collapse whitespace per `options`."""
    result = text if options.case_sensitive else text.lower()
    if options.strip_punctuation:
        result = _strip_punctuation(result)
    if options.normalize_whitespace:
        result = _WHITESPACE_RE.sub(" ", result).strip()
    return result


def _extends_cluster(char: str) -> bool:
    if unicodedata.category(char) in ("Mn", "Mc", "Me"):
        return True
    code = ord(char)
    return (
        0xFE00 <= code <= 0xFE0F  # variation selectors
        or 0x1F3FB <= code <= 0x1F3FF  # skin tone modifiers
        or 0xE0020 <= code <= 0xE007F  # tag characters
        or char == _ZWJ
    )


def _is_regional_indicator(char: str) -> bool:
    return 0x1F1E6 <= ord(char) <= 0x1F1FF


def split_graphemes(text: str) -> List[str]:
    """Best-effort split into user-perceived characters.

    Handles combining marks, ZWJ sequences, variation selectors, emoji
    modifiers, flag pairs and CR LF. Hangul jamo sequences are not merged.
    """
    clusters: List[str] = []
    glue_next = False
    for char in text:
        if clusters:
            last = clusters[-1]
            if (
                glue_next
                or _extends_cluster(char)
                or (char == "\n" and last == "\r")
                or (
                    _is_regional_indicator(char)
                    and len(last) == 1
                    and _is_regional_indicator(last)
                )
            ):
                clusters[-1] = last + char
                glue_next = char == _ZWJ
                continue
        clusters.append(char)
        glue_next = False
    return clusters


def split_characters(text: str, mode: LengthMode) -> List[str]:
    if not text:
        return []
    if mode is LengthMode.BYTES:
        # One unit per UTF-8 byte, viewed as a one-character string.
        return list(text.encode("utf-8").decode("latin-1"))
    if mode is LengthMode.GRAPHEMES:
        return split_graphemes(text)
    return list(text)


def string_length(text: str, mode: LengthMode) -> int:
    if mode is LengthMode.BYTES:
        return len(text.encode("utf-8"))
    if mode is LengthMode.CODEPOINTS:
        return len(text)
    return len(split_graphemes(text))


def _fold(token: str, options: Options) -> str:
    return token if options.case_sensitive else token.lower()


def _custom_tokens(text: str, options: Options) -> List[str]:
    tokens = options.tokenizer(text, options)
    if isinstance(tokens, (str, bytes)) or not isinstance(tokens, SequenceABC):
        raise InvalidArgumentError(
            f"Custom tokenizer must return a sequence of strings, got {type(tokens).__name__}"
        )
    return [_fold(t if isinstance(t, str) else str(t), options) for t in tokens]


def tokenize(text: str, options: Options) -> List[str]:
    """Split normalized text into tokens under the active granularity."""
    if not text:
        return []
    if options.tokenizer is not None:
        return _custom_tokens(text, options)

    if options.granularity is Granularity.CHARACTER:
        return split_characters(text, options.mode)
    if options.granularity is Granularity.WORD:
        tokens = _WORD_RE.findall(text)
    else:
        tokens = text.split()
    return [_fold(t, options) for t in tokens]


def prepare_input(text: str, options: Options) -> PreparedInput:
    normalized = normalize_text(text, options)
    return PreparedInput(
        normalized=normalized,
        tokens=tuple(tokenize(normalized, options)),
        characters=tuple(split_characters(normalized, options.mode)),
    )
