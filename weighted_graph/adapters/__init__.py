"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces:
- Graph storage (text and JSON files)
- Path solvers (depth-first, Dijkstra)
"""
