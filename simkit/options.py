"""
Option resolution for the similarity engine.

Summary:
- Merges caller overrides over per-algorithm defaults over global defaults
  and validates the result into a frozen `Options` model.
- Coercion, enum lookup and clamping live in the model's validators;
  scorers never validate.

Enums:
- `Algorithm` is the closed set of eleven scorers. `monge-elkan` and
  `soft-tfidf` are composite and can never be used as a secondary metric.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError, ValidationInfo, field_validator

from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)

E = TypeVar("E", bound="_NamedEnum")


class _NamedEnum(str, Enum):
    @classmethod
    def parse(cls: Type[E], value: Any) -> E:
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        for member in cls:
            if member.value == name:
                return member
        raise InvalidArgumentError(f"Unsupported {cls._label()}: {value!r}")

    @classmethod
    def _label(cls) -> str:
        return cls.__name__.lower()

    def __str__(self) -> str:
        return self.value


class Algorithm(_NamedEnum):
    LEVENSHTEIN = "levenshtein"
    DAMERAU_LEVENSHTEIN = "damerau-levenshtein"
    JARO_WINKLER = "jaro-winkler"
    LCS_MYERS = "lcs-myers"
    RATCLIFF_OBERSHELP = "ratcliff-obershelp"
    JACCARD = "jaccard"
    SORENSEN_DICE = "sorensen-dice"
    COSINE_NGRAMS = "cosine-ngrams"
    MONGE_ELKAN = "monge-elkan"
    SOFT_TFIDF = "soft-tfidf"
    GITHUB_STYLE = "github-style"

    @classmethod
    def _label(cls) -> str:
        return "similarity algorithm"

    @property
    def composite(self) -> bool:
        return self in (Algorithm.MONGE_ELKAN, Algorithm.SOFT_TFIDF)


class Granularity(_NamedEnum):
    TOKEN = "token"
    WORD = "word"
    CHARACTER = "character"


class LengthMode(_NamedEnum):
    BYTES = "bytes"
    CODEPOINTS = "codepoints"
    GRAPHEMES = "graphemes"

    @classmethod
    def _label(cls) -> str:
        return "length mode"


class Weighting(_NamedEnum):
    BINARY = "binary"
    TF = "tf"
    LOG = "log"
    AUGMENTED = "augmented"
    DOUBLE_NORMALIZATION = "double-normalization-0.5"
    TFIDF = "tfidf"

    @classmethod
    def _label(cls) -> str:
        return "weighting strategy"


# Called as tokenizer(normalized_text, options).
Tokenizer = Callable[..., Sequence[str]]

_ENUM_FIELDS: Dict[str, Type[_NamedEnum]] = {
    "granularity": Granularity,
    "mode": LengthMode,
    "weighting": Weighting,
    "secondary_metric": Algorithm,
}


class Options(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    granularity: Granularity
    case_sensitive: bool
    normalize_whitespace: bool
    strip_punctuation: bool
    threshold: float
    mode: LengthMode
    tokenizer: Optional[Tokenizer]
    prefix_scale: float
    prefix_limit: int
    weight_common_prefix: float
    token_set: bool
    n: int
    weighting: Weighting
    transposition_cost: int
    secondary_metric: Algorithm
    tau: float
    symmetric: bool

    @field_validator(*_ENUM_FIELDS, mode="before")
    @classmethod
    def parse_enum(cls, value: Any, info: ValidationInfo) -> Any:
        return _ENUM_FIELDS[info.field_name].parse(value)

    @field_validator("strip_punctuation", mode="before")
    @classmethod
    def default_strip_punctuation(cls, value: Any, info: ValidationInfo) -> Any:
        # Unset: strip for token/word granularity, keep for character.
        if value is None and "granularity" in info.data:
            return info.data["granularity"] is not Granularity.CHARACTER
        return value

    @field_validator("prefix_limit", "n", "transposition_cost", mode="before")
    @classmethod
    def truncate_float(cls, value: Any) -> Any:
        if isinstance(value, float):
            return int(value)
        return value

    @field_validator("threshold", "tau")
    @classmethod
    def clamp_unit_interval(cls, value: float) -> float:
        return max(0.0, min(1.0, value))

    @field_validator("prefix_limit", "transposition_cost")
    @classmethod
    def floor_zero(cls, value: int) -> int:
        return max(0, value)

    @field_validator("weight_common_prefix")
    @classmethod
    def floor_zero_float(cls, value: float) -> float:
        return max(0.0, value)

    @field_validator("n")
    @classmethod
    def floor_one(cls, value: int) -> int:
        return max(1, value)

    @field_validator("secondary_metric")
    @classmethod
    def validate_secondary(cls, value: Algorithm) -> Algorithm:
        if value.composite:
            raise ValueError("Composite algorithms cannot be used as secondary metrics.")
        return value


GLOBAL_DEFAULTS: Dict[str, Any] = {
    "granularity": Granularity.TOKEN,
    "case_sensitive": False,
    "normalize_whitespace": True,
    "strip_punctuation": None,
    "threshold": 0.0,
    "tokenizer": None,
    "prefix_scale": 0.1,
    "prefix_limit": 4,
    "weight_common_prefix": 0.0,
    "token_set": True,
    "n": 3,
    "weighting": Weighting.BINARY,
    "transposition_cost": 1,
    "secondary_metric": Algorithm.JARO_WINKLER,
    "tau": 0.9,
    "symmetric": True,
}

ALGORITHM_DEFAULTS: Dict[Algorithm, Dict[str, Any]] = {
    Algorithm.LEVENSHTEIN: {},
    Algorithm.DAMERAU_LEVENSHTEIN: {"transposition_cost": 1},
    Algorithm.JARO_WINKLER: {"prefix_scale": 0.1, "prefix_limit": 4},
    Algorithm.LCS_MYERS: {"weight_common_prefix": 0.0},
    Algorithm.RATCLIFF_OBERSHELP: {"symmetric": True},
    Algorithm.JACCARD: {"token_set": True},
    Algorithm.SORENSEN_DICE: {"token_set": True},
    Algorithm.COSINE_NGRAMS: {"n": 3, "weighting": Weighting.BINARY},
    Algorithm.MONGE_ELKAN: {"secondary_metric": Algorithm.JARO_WINKLER, "tau": 0.9},
    Algorithm.SOFT_TFIDF: {
        "secondary_metric": Algorithm.JARO_WINKLER,
        "tau": 0.9,
        "weighting": Weighting.TFIDF,
    },
    Algorithm.GITHUB_STYLE: {"prefix_scale": 0.05, "prefix_limit": 3},
}


def _describe(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        field = ".".join(str(loc) for loc in item["loc"]) or "options"
        parts.append(f"{field}: {item['msg']}")
    return "; ".join(parts)


def resolve_options(
    overrides: Optional[Mapping[str, Any]],
    algorithm: Algorithm,
    mode: Any = LengthMode.GRAPHEMES,
) -> Options:
    """Merge and validate options for one `compute` call.

    Raises `InvalidArgumentError` for unknown keys, unsupported enum values,
    non-numeric numbers, a composite secondary metric or a tokenizer that is
    not callable.
    """
    merged: Dict[str, Any] = {**GLOBAL_DEFAULTS, "mode": mode}
    merged.update(ALGORITHM_DEFAULTS[algorithm])
    merged.update(overrides or {})

    try:
        return Options.model_validate(merged)
    except ValidationError as e:
        message = f"Invalid similarity options for {algorithm}: {_describe(e)}"
        logger.debug("Rejecting options: %s", message)
        raise InvalidArgumentError(message) from e
