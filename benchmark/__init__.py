"""Benchmark suite for matrix traversals.

This package times every traversal on nested Python lists and on PyTorch
tensors of the same shape.
"""
