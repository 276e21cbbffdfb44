"""Keyword normalization: trailing punctuation, alphabetic check, noise words."""

from collections.abc import Iterable, Iterator

PUNCTUATION = ".,?:;!"


class NoiseWords:
    """Immutable, case-insensitive set of words excluded from indexing."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words = frozenset(w.strip().lower() for w in words if w.strip())

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"NoiseWords({sorted(self._words)!r})"


def _strip_trailing_punctuation(word: str) -> str:
    # a single character is never stripped, so the result is never empty
    while len(word) > 1 and word[-1] in PUNCTUATION:
        word = word[:-1]
    return word


def normalize(raw: str, noise_words: NoiseWords) -> str | None:
    """Return the lowercase keyword for a raw token, or None if it is not one.

    normalize("Fox,", NoiseWords())       -> "fox"
    normalize("fox1", NoiseWords())       -> None
    normalize("The", NoiseWords(["the"])) -> None
    """
    word = raw.strip()
    if not word:
        return None
    word = _strip_trailing_punctuation(word)
    if not word.isalpha():
        return None
    if word in noise_words:
        return None
    return word.lower()
