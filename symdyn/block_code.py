"""Sliding block codes between shift spaces."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING

from symdyn.sofic import SoficShift
from symdyn.words import Word

if TYPE_CHECKING:
    from symdyn.sft import SFT


class BlockCode:
    """A sliding block code given by a block map on windows of a fixed size.

    The window covers ``memory`` symbols before the current one, the current
    symbol and ``anticipation`` symbols after it.
    """

    def __init__(
        self,
        fun: Callable[[Word], int],
        memory: int = 0,
        anticipation: int = 0,
    ) -> None:
        if memory < 0 or anticipation < 0:
            raise ValueError("Memory and anticipation must not be negative")
        self._fun = fun
        self.memory = memory
        self.anticipation = anticipation

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[Iterable[int], int],
        memory: int = 0,
        anticipation: int = 0,
    ) -> "BlockCode":
        """Build a code from a table that sends every window to its image."""
        table = {tuple(block): image for block, image in mapping.items()}

        def lookup(word: Word) -> int:
            try:
                return table[word]
            except KeyError:
                raise KeyError(f"No image for block {word!r}") from None

        return cls(lookup, memory, anticipation)

    @property
    def window_size(self) -> int:
        """The number of symbols the block map reads."""
        return self.memory + self.anticipation + 1

    def map_word(self, word: Iterable[int]) -> int:
        """Apply the block map to one window."""
        block = tuple(word)
        if len(block) != self.window_size:
            raise ValueError(
                f"Block of length {len(block)} does not fit a window of {self.window_size}"
            )
        return self._fun(block)

    def map_sft(self, sft: "SFT") -> SoficShift:
        """Return the image of ``sft``, presented by relabelling a higher block shift."""
        window = self.window_size
        n = max(window, sft.m_step)
        graph = sft.nth_higher_block_shift(n).higher_block_shift
        images: set[int] = set()
        for edge in graph.edges():
            image = self.map_word(edge.label[:window])
            images.add(image)
            graph.set_edge_label(edge.source, edge.dest, (image,))
        return SoficShift(sorted(images), graph, right_resolving=False, irreducible=False)

    def compose(self, other: "BlockCode") -> "BlockCode":
        """Return the code that applies this code first and then ``other``."""
        first_window = self.window_size

        def composed(word: Word) -> int:
            intermediate = tuple(
                self.map_word(word[start:start + first_window])
                for start in range(len(word) - first_window + 1)
            )
            return other.map_word(intermediate)

        return BlockCode(
            composed,
            self.memory + other.memory,
            self.anticipation + other.anticipation,
        )

    def __repr__(self) -> str:
        return f"BlockCode(memory={self.memory}, anticipation={self.anticipation})"