"""Symbolic dynamics: graphs, shifts of finite type, sofic shifts, block codes, cylinder sets and Markov measures."""

__version__ = "1.0.0"