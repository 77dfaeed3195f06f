"""Traversal, shortest-path and spanning-tree algorithms."""
