# symdyn

Tools for working with symbolic dynamical systems in Python.

- **Words** (`symdyn.words`): words are tuples of integer symbols.
  `generate_all_words` lists every word of a given length, and
  `generate_full_length_forbidden_words` extends forbidden words to a given
  length in every possible way.
- **Graphs** (`symdyn.graph`): directed, weighted, labelled graphs. A weight of
  zero means that there is no edge. `MatrixGraph` and `UnweightedMatrixGraph`
  store an adjacency matrix. `AdjacencyListGraph` stores one mapping per node.
  `UnweightedMatrixGraph.complement()` has an edge exactly where the original
  graph has none.
- **Graph algorithms** (`symdyn.graph_algorithms`):
  `strongly_connected_components` uses Tarjan's algorithm. The module also has
  `period`, `is_aperiodic`, `is_primitive` and `sccs_as_matrices`.
- **Sofic shifts** (`symdyn.sofic`): `SoficShift` is given by an alphabet and a
  presentation graph whose edges carry one-symbol labels. Its flags
  `right_resolving` and `irreducible` describe the presentation. The module
  also has `sofic_shift_union` and `sofic_shift_intersection`.
- **Shifts of finite type** (`symdyn.sft`): `SFT` is built from an alphabet and
  a list of forbidden words. It has `nth_higher_block_shift(n)`, `entropy()`,
  `is_transitive()`, `is_mixing()` and `m_step`. `sft_factor_map` and
  `map_sofic_shift` relate a sofic shift to the edge shift of its presentation.
- **Block codes** (`symdyn.block_code`): `BlockCode` is a sliding block code
  with `memory` and `anticipation`. You can build one from a function or from a
  table (`BlockCode.from_mapping`). It has `map_word`, `map_sft` and `compose`.
- **Cylinder sets** (`symdyn.cylinder`): `CylinderSet` fixes symbols at a range
  of coordinates, and `WILDCARD` leaves a coordinate free. It has
  `intersection`, `divide_into_disjoint` and `is_subset_of` (a sofic shift).
  `HammingDistance` and `PadicDistance` give lower and upper bounds on
  distances.
- **Measures** (`symdyn.measure`): `MarkovMeasure` is built from a transition
  matrix. It has `stationary_distribution()`, `cylinder_set_measure(cs)` and
  `compatible_with(sft)`.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Quick start

```python
from symdyn.sft import SFT

# The golden mean shift: binary sequences with no two consecutive 1s.
golden_mean = SFT([0, 1], [[1, 1]])

print(golden_mean.entropy())        # log of the golden ratio, about 0.4812
print(golden_mean.is_transitive())  # True
print(golden_mean.is_mixing())      # True
print(golden_mean.m_step)           # 1
```

### Sofic shifts

```python
from symdyn.graph import UnweightedMatrixGraph
from symdyn.sofic import SoficShift, sofic_shift_intersection, sofic_shift_union

even = UnweightedMatrixGraph(2)
even.add_edge(0, 0, 1, [1])
even.add_edge(0, 1, 1, [0])
even.add_edge(1, 0, 1, [0])
even_shift = SoficShift([0, 1], even, right_resolving=True, irreducible=True)

print(even_shift.entropy())
```

`sofic_shift_union` presents the union by the disjoint union of both graphs.
`sofic_shift_intersection` presents the intersection by the label product of
both graphs. Both results are marked as not irreducible.

### Block codes

```python
from symdyn.block_code import BlockCode
from symdyn.sft import SFT

swap = BlockCode(lambda word: 1 - word[0], 0, 0)
image = swap.map_sft(SFT([0, 1], []))
print(image.alphabet)  # (0, 1)
```

### Cylinder sets and distances

```python
from symdyn.cylinder import WILDCARD, CylinderSet, HammingDistance, PadicDistance

a = CylinderSet([0, 1, WILDCARD, 0, 1], -1, 3)
b = CylinderSet([0, 0, WILDCARD, 0, 1], -2, 2)

print(HammingDistance().bound(a, b))  # (1.0, inf)
print(PadicDistance().bound(a, b))    # (0.25, 2.5)
```

## Examples

The command below prints an overview of the golden mean shift and its
presentations. It then prints the entropies of the even shift, the full shift,
their intersection and their union:

```
symdyn-examples
```

`symdyn.examples.sft_example()` and `symdyn.examples.sofic_example()` return the
same text as strings.

## Limitations

- `SoficShift` does not check whether a presentation really is right-resolving
  or irreducible. It trusts the flags it is given.
- `SoficShift.entropy()` raises `TypeError` unless the presentation is marked
  right-resolving.
- The distance bounds treat wildcards as any symbol of a full shift. They take
  no account of constraints imposed by a shift space.
- Higher block presentations are not reduced to an irreducible form.

## Running the tests

```
pytest
```