"""Insertion sort and bottom-up merge sort, with tools to sort files of integers and time the sorts."""

__version__ = "0.1.0"
__all__ = ["cli", "insertion", "merge", "vectors"]