"""Sorting, edit distance, hash table, word frequency and graph search, with command-line tools."""

__version__ = "0.1.0"

__all__ = ["bfs", "editdistance", "graph", "hashtable", "sorting", "spellcheck", "wordfreq"]