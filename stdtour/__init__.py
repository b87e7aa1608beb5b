"""Sorted linked lists, numeric folds and scans, filesystem helpers, geometric objects, searchers and small utilities."""

__version__ = "0.1.0"