"""Dynamic programming on grids, subsets and sequences."""