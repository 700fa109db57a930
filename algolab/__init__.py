"""Containers, search trees, heaps, random generators and finite-difference Poisson solvers."""

__version__ = "0.1.0"