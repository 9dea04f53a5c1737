"""Words over finite alphabets and helpers for enumerating them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from itertools import product

Word = tuple[int, ...]


def hash_word(word: Iterable[int]) -> str:
    """Return a string key for ``word``: every symbol followed by ``$``."""
    return "".join(f"{symbol}$" for symbol in word)


def hash_words(words: Iterable[Iterable[int]]) -> set[str]:
    """Return the set of string keys of ``words``."""
    return {hash_word(word) for word in words}


def _pad_to_length(word: Word, alphabet: Sequence[int], length: int) -> Iterator[Word]:
    if len(word) == length:
        yield word
        return
    for symbol in alphabet:
        yield from _pad_to_length(word + (symbol,), alphabet, length)
        yield from _pad_to_length((symbol,) + word, alphabet, length)


def generate_full_length_forbidden_words(
    forbidden_words: Iterable[Iterable[int]],
    alphabet: Iterable[int],
    length: int,
) -> list[Word]:
    """Extend every forbidden word to ``length`` symbols in all possible ways.

    Symbols are added both at the back and at the front, so the result may
    contain the same word more than once.
    """
    symbols = tuple(alphabet)
    result: list[Word] = []
    for word in forbidden_words:
        word = tuple(word)
        if len(word) > length:
            raise ValueError(
                f"forbidden word of length {len(word)} is longer than {length}"
            )
        result.extend(_pad_to_length(word, symbols, length))
    return result


def generate_all_words(alphabet: Iterable[int], length: int) -> list[Word]:
    """Return every word of ``length`` symbols, in the order of the alphabet."""
    return [tuple(word) for word in product(tuple(alphabet), repeat=length)]