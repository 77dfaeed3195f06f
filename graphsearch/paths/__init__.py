"""Path primitives and path reconstruction.

This package defines the immutable results of a search and the bookkeeping
used to build them:
- ``Path`` / ``WeightedPath`` model a vertex-and-edge sequence, optionally with
  its total weight.
- ``PredecessorsList`` and ``ShortestDistances`` record search state and rebuild
  concrete paths from it on demand.
"""
