"""Graph traversal, ordering, grid searches, shortest paths and disjoint sets."""