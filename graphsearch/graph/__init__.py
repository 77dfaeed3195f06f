"""Graph primitives and helpers.

This package provides the read-only graph interfaces (`base`), the strict
NetworkX-backed graphs (`strict_multigraph`), the `SpanningTree` result type
and conversion helpers (`convert`).
"""
