"""Word tokenization and the noun-like filter used by the generation techniques."""

from __future__ import annotations

import re

_STRIP_RE = re.compile(r"[^\w\s'-]")

MIN_TOKEN_LENGTH = 3
MIN_NOUN_LENGTH = 5

STOPWORDS = frozenset(
    {
        "about", "above", "across", "after", "again", "against", "along", "also", "among", "and",
        "another", "are", "around", "because", "been", "before", "behind", "being", "below",
        "beneath", "beside", "besides", "between", "beyond", "both", "but", "can", "cannot",
        "could", "did", "does", "doing", "down", "during", "each", "either", "else", "every",
        "few", "for", "from", "further", "had", "has", "have", "having", "her", "here", "hers",
        "herself", "him", "himself", "his", "how", "however", "inside", "into", "its", "itself",
        "just", "less", "many", "might", "more", "most", "much", "must", "near", "neither",
        "never", "nor", "not", "now", "off", "once", "only", "onto", "other", "others", "ought",
        "our", "ours", "ourselves", "out", "outside", "over", "own", "past", "rather", "same",
        "shall", "she", "should", "since", "some", "such", "than", "that", "the", "their",
        "theirs", "them", "themselves", "then", "there", "therefore", "these", "they", "this",
        "those", "though", "through", "throughout", "thus", "too", "toward", "towards", "under",
        "underneath", "unless", "until", "upon", "very", "was", "were", "what", "whatever",
        "when", "whenever", "where", "whereas", "whether", "which", "while", "who", "whom",
        "whose", "why", "will", "with", "within", "without", "would", "yet", "you", "your",
        "yours", "yourself", "according", "although", "located", "known", "named", "called",
    }
)


def tokenize(text: str | None) -> list[str]:
    """Lowercase word tokens longer than two characters."""
    if not text:
        return []
    cleaned = _STRIP_RE.sub("", text.lower())
    return [token for token in cleaned.split() if len(token) >= MIN_TOKEN_LENGTH]


def extract_nouns(text: str | None) -> list[str]:
    """Distinct noun-like tokens in order of first appearance."""
    nouns: list[str] = []
    seen: set[str] = set()
    for token in tokenize(text):
        if len(token) < MIN_NOUN_LENGTH or token in STOPWORDS or token in seen:
            continue
        seen.add(token)
        nouns.append(token)
    return nouns
