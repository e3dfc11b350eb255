"""Run two commands joined by a pipe between an input file and an output file, with small text, memory and list helpers."""

__version__ = "0.1.0"