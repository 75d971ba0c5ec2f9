"""Text generation techniques that fuse two descriptions into one whisper.

Each technique is a pure function of its inputs plus a random source. None of
them capitalize; ``WhisperGenerator`` does that once for whichever ran.
"""

from __future__ import annotations

import re
from collections import defaultdict
from collections.abc import Callable, Mapping, Sequence
from types import MappingProxyType

from .lexicon import STOPWORDS, extract_nouns, tokenize
from .models import PointOfInterest
from .phrasebook import (
    ABSTRACTS,
    BRIDGE_PHRASES,
    CUTUP_SEPARATOR,
    DEFAULT_NOUN_A,
    DEFAULT_NOUN_B,
    SKIPGRAM_SUFFIX,
    TEMPLATES,
    VERBS,
)
from .randomness import RandomSource

Technique = Callable[[PointOfInterest, PointOfInterest, RandomSource], str]

_PARENTHETICAL_RE = re.compile(r"\s*\([^)]*\)")

MARKOV_MIN_WORDS = 7
MARKOV_MAX_WORDS = 8
CUTUP_MIN_CHUNK = 2
CUTUP_MAX_CHUNK = 4
CUTUP_MIN_TARGET = 4
CUTUP_MAX_TARGET = 6
SKIPGRAM_STRIDE = 2
SKIPGRAM_KEEP_PROBABILITY = 0.7
SKIPGRAM_MAX_TOKENS = 6


def clean_title(title: str) -> str:
    """Drop parenthetical qualifiers and anything after the first comma."""
    stripped = _PARENTHETICAL_RE.sub("", title)
    return stripped.split(",", 1)[0].strip() or title.strip()


def template_fill(
    fragment_a: str,
    fragment_b: str,
    title_a: str,
    title_b: str,
    rng: RandomSource,
    *,
    templates: Sequence[str] = TEMPLATES,
) -> str:
    nouns_a = extract_nouns(fragment_a)
    nouns_b = extract_nouns(fragment_b)
    slots = {
        "A": clean_title(title_a),
        "B": clean_title(title_b),
        "nounA": nouns_a[0] if nouns_a else DEFAULT_NOUN_A,
        "nounB": nouns_b[0] if nouns_b else DEFAULT_NOUN_B,
        "verbA": rng.choice(VERBS),
        "verbB": rng.choice(VERBS),
        "abstract": rng.choice(ABSTRACTS),
    }
    return rng.choice(templates).format_map(slots)


def build_bigrams(*fragments: str) -> dict[str, list[str]]:
    """Directed word -> successors map; edges never cross fragment boundaries."""
    graph: dict[str, list[str]] = defaultdict(list)
    for fragment in fragments:
        tokens = tokenize(fragment)
        for current, following in zip(tokens, tokens[1:]):
            graph[current].append(following)
    return dict(graph)


def markov_blend(fragment_a: str, fragment_b: str, rng: RandomSource) -> str:
    """Random walk over the merged bigram map, seeded from shared vocabulary."""
    graph = build_bigrams(fragment_a, fragment_b)
    if not graph:
        raise ValueError("no bigrams to walk")

    tokens_b = set(tokenize(fragment_b))
    shared = [token for token in dict.fromkeys(tokenize(fragment_a)) if token in tokens_b]
    content = [token for token in shared if token not in STOPWORDS]
    seeds = content or shared or list(graph)
    current = rng.choice(seeds)

    length = rng.randint(MARKOV_MIN_WORDS, MARKOV_MAX_WORDS)
    words = [current]
    while len(words) < length:
        successors = graph.get(current)
        if not successors:
            break
        current = rng.choice(successors)
        words.append(current)
    return " ".join(words)


def _chunk(words: list[str], rng: RandomSource) -> list[str]:
    chunks: list[list[str]] = []
    index = 0
    while index < len(words):
        size = rng.randint(CUTUP_MIN_CHUNK, CUTUP_MAX_CHUNK)
        chunks.append(words[index : index + size])
        index += size
    # a lone trailing word joins the chunk before it, or borrows one from a full chunk
    if len(chunks) > 1 and len(chunks[-1]) < CUTUP_MIN_CHUNK:
        if len(chunks[-2]) < CUTUP_MAX_CHUNK:
            chunks[-2].extend(chunks.pop())
        else:
            chunks[-1].insert(0, chunks[-2].pop())
    return [" ".join(chunk) for chunk in chunks]


def cut_up(fragment_a: str, fragment_b: str, rng: RandomSource) -> str:
    """Burroughs-style cut-up of two descriptions."""
    pools = [_chunk(fragment_a.lower().split(), rng), _chunk(fragment_b.lower().split(), rng)]
    target = rng.randint(CUTUP_MIN_TARGET, CUTUP_MAX_TARGET)
    side = rng.randrange(2)

    pieces: list[str] = []
    while len(pieces) < target and (pools[0] or pools[1]):
        if not pools[side]:
            side ^= 1
        pool = pools[side]
        pieces.append(pool.pop(rng.randrange(len(pool))))
        side ^= 1
    return CUTUP_SEPARATOR.join(pieces)


def trigrams(word: str) -> set[str]:
    return {word[i : i + 3] for i in range(len(word) - 2)}


def phonetic_bridge(fragment_a: str, fragment_b: str, rng: RandomSource) -> str:
    """Join the cross pair of nouns that shares the most trigrams."""
    nouns_a = extract_nouns(fragment_a) or [DEFAULT_NOUN_A]
    nouns_b = extract_nouns(fragment_b) or [DEFAULT_NOUN_B]

    best = (nouns_a[0], nouns_b[0])
    best_overlap = -1
    for noun_a in nouns_a:
        grams_a = trigrams(noun_a)
        for noun_b in nouns_b:
            overlap = len(grams_a & trigrams(noun_b))
            if overlap > best_overlap:
                best, best_overlap = (noun_a, noun_b), overlap

    return rng.choice(BRIDGE_PHRASES).format(a=best[0], b=best[1])


def skip_gram(fragment_a: str, fragment_b: str, rng: RandomSource) -> str:
    tokens = (tokenize(fragment_a), tokenize(fragment_b))
    picked: list[str] = []
    for index in range(0, max(len(tokens[0]), len(tokens[1])), SKIPGRAM_STRIDE):
        for stream in tokens:
            if index < len(stream) and rng.random() < SKIPGRAM_KEEP_PROBABILITY:
                picked.append(stream[index])
            if len(picked) >= SKIPGRAM_MAX_TOKENS:
                return " ".join(picked) + SKIPGRAM_SUFFIX
    if not picked:
        return ""
    return " ".join(picked) + SKIPGRAM_SUFFIX


TECHNIQUES: Mapping[str, Technique] = MappingProxyType(
    {
        "template": lambda a, b, rng: template_fill(a.fragment, b.fragment, a.title, b.title, rng),
        "markov": lambda a, b, rng: markov_blend(a.fragment, b.fragment, rng),
        "cutup": lambda a, b, rng: cut_up(a.fragment, b.fragment, rng),
        "bridge": lambda a, b, rng: phonetic_bridge(a.fragment, b.fragment, rng),
        "skipgram": lambda a, b, rng: skip_gram(a.fragment, b.fragment, rng),
    }
)
