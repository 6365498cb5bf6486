"""
PageRank strategy recommendation engine.

Responsibilities:
- Accept a graph descriptor (node/edge counts, directedness, tolerance) and a memory budget.
- Derive density and memory footprint, and decide whether the graph must be partitioned.
- Select an algorithm from an ordered decision table keyed on size band, precision and density.
- Adjust the result for undirected graphs and high-precision tolerances.
"""
