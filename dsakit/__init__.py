"""Stacks, linked lists, binary search trees, searching, sorting, postfix
evaluation, polynomial addition and dense and sparse matrices."""

__version__ = "0.1.0"