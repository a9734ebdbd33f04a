"""Benchmarking of classic sorting algorithms on generated or file-supplied data, with simple graph containers."""

__version__ = "0.1.0"