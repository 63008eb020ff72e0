"""
Parser for spellbook stats text.

Stats text is three tokens separated by whitespace or payloads:

    <type> <aspect>[/<aspect>...] <rank glyphs>

e.g. "Magical Piercing/Fire ★★★". The grammar is closed: any token outside
the vocabulary fails the whole parse.
"""

from dataclasses import dataclass
from enum import Enum
from functools import reduce
from operator import or_
from typing import Dict, List, Type, TypeVar, Union

from domain.exceptions import StatsParseError
from domain.value_objects.categories import RANK_GLYPH, SpellAspect, SpellRank, SpellType, describe
from infrastructure.rich_text import RichTextError, decode_rich_text

E = TypeVar("E", bound=Enum)

STATS_TOKEN_COUNT = 3
ASPECT_SEPARATOR = "/"


@dataclass(frozen=True)
class ParsedStats:
    """Result of parsing one stats string."""

    spell_type: SpellType
    aspect: SpellAspect
    rank: SpellRank


def _build_vocabulary(enum_cls: Type[E]) -> Dict[str, E]:
    """Map display labels and member names (title case) to members."""
    vocabulary: Dict[str, E] = {}
    for member in enum_cls:
        vocabulary[describe(member).label] = member
        vocabulary[member.name.title()] = member
    return vocabulary


TYPE_VOCABULARY: Dict[str, SpellType] = _build_vocabulary(SpellType)
ASPECT_VOCABULARY: Dict[str, SpellAspect] = _build_vocabulary(SpellAspect)


def tokenize_stats(text: Union[bytes, str]) -> List[str]:
    """Strip payloads and split the remaining text on whitespace."""
    try:
        segments = decode_rich_text(text)
    except RichTextError as e:
        raise StatsParseError(str(text), str(e)) from e
    return [token for segment in segments for token in segment.split()]


def parse_type(token: str) -> SpellType:
    if token not in TYPE_VOCABULARY:
        raise StatsParseError(token, "unknown spell type")
    return TYPE_VOCABULARY[token]


def parse_aspect(token: str) -> SpellAspect:
    aspects = []
    for part in token.split(ASPECT_SEPARATOR):
        if part not in ASPECT_VOCABULARY:
            raise StatsParseError(token, f"unknown aspect {part!r}")
        aspects.append(ASPECT_VOCABULARY[part])
    return reduce(or_, aspects)


def parse_rank(token: str) -> SpellRank:
    glyphs = token.strip()
    if not glyphs or any(ch != RANK_GLYPH for ch in glyphs):
        raise StatsParseError(token, "rank must be a run of rank glyphs")
    ordinal = len(glyphs) - 1
    try:
        return SpellRank(ordinal)
    except ValueError as e:
        raise StatsParseError(token, f"rank {ordinal + 1} out of range") from e


def parse_stats(text: Union[bytes, str]) -> ParsedStats:
    """
    Parse a stats string into type, aspect mask and rank.

    Args:
        text: Raw stats text, payloads allowed

    Returns:
        ParsedStats

    Raises:
        StatsParseError: If the text does not match the grammar
    """
    tokens = tokenize_stats(text)
    if len(tokens) != STATS_TOKEN_COUNT:
        raise StatsParseError(
            str(text), f"expected {STATS_TOKEN_COUNT} tokens, got {len(tokens)}"
        )

    type_token, aspect_token, rank_token = tokens
    return ParsedStats(
        spell_type=parse_type(type_token),
        aspect=parse_aspect(aspect_token),
        rank=parse_rank(rank_token),
    )
