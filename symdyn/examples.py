"""Worked examples of shifts of finite type and sofic shifts."""

from __future__ import annotations

import argparse
from typing import Any, Iterable, Optional, Sequence

import numpy as np

from symdyn.graph import UnweightedMatrixGraph
from symdyn.sft import SFT
from symdyn.sofic import SoficShift, sofic_shift_intersection, sofic_shift_union


def format_word_matrix(matrix: Iterable[Iterable[Iterable[int]]]) -> str:
    """Lay out a matrix of words, each right-aligned in five columns plus a space."""
    lines = []
    for row in matrix:
        cells = ("".join(str(symbol) for symbol in word) for word in row)
        lines.append("".join(f"{cell:>5} " for cell in cells) + "\n")
    return "".join(lines)


def _format_matrix(matrix: Any) -> str:
    rows = [[str(value) for value in row] for row in np.asarray(matrix).tolist()]
    width = max((len(cell) for row in rows for cell in row), default=0)
    return "\n".join(" ".join(cell.rjust(width) for cell in row) for row in rows)


def _entropy_overview(shift: SoficShift, name: str) -> list[str]:
    return [f"{name}:", "Entropy", f"{shift.entropy():g}"]


def _sft_overview(sft: SFT, name: str) -> list[str]:
    return [
        *_entropy_overview(sft, name),
        "Is transitive?",
        "Yes" if sft.is_transitive() else "No",
        "Is mixing?",
        "Yes" if sft.is_mixing() else "No",
    ]


def sft_example() -> str:
    """Describe the golden mean shift and two of its presentations."""
    golden_mean_shift = SFT((0, 1), [(1, 1)])
    lines = _sft_overview(golden_mean_shift, "Golden mean shift")

    representation = golden_mean_shift.edge_shift
    lines += ["", "Adjacency matrix:", _format_matrix(representation.adjacency_matrix)]
    lines.append("Label matrix")
    text = "\n".join(lines) + "\n" + format_word_matrix(representation.label_matrix)

    higher = golden_mean_shift.nth_higher_block_shift(4).higher_block_shift
    text += "\nHigher block shift matrix:\n" + _format_matrix(higher.adjacency_matrix) + "\n"
    return text


def sofic_example() -> str:
    """Describe the even shift, the full shift, their intersection and their union."""
    presentation = UnweightedMatrixGraph(2)
    presentation.add_edge(0, 0, 1, (1,))
    presentation.add_edge(0, 1, 1, (0,))
    presentation.add_edge(1, 0, 1, (0,))
    even_shift = SoficShift((0, 1), presentation, right_resolving=True, irreducible=True)

    presentation_full = UnweightedMatrixGraph(2)
    presentation_full.add_edge(0, 1, 1, (1,))
    presentation_full.add_edge(1, 1, 1, (1,))
    presentation_full.add_edge(0, 0, 1, (0,))
    presentation_full.add_edge(1, 0, 1, (0,))
    full_shift = SoficShift((0, 1), presentation_full, right_resolving=True, irreducible=True)

    intersection = sofic_shift_intersection(full_shift, even_shift)
    union = sofic_shift_union(full_shift, even_shift)

    lines = [
        *_entropy_overview(even_shift, "Even shift"),
        *_entropy_overview(full_shift, "Full shift"),
        *_entropy_overview(intersection, "Intersection"),
        *_entropy_overview(union, "Union"),
    ]
    return "\n".join(lines) + "\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print both examples."""
    parser = argparse.ArgumentParser(
        prog="symdyn-examples",
        description="Print worked examples of shifts of finite type and sofic shifts.",
    )
    parser.parse_args(argv)
    print(sft_example(), end="")
    print(sofic_example(), end="")
    return 0