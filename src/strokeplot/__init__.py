"""Strokeplot - Render stroke-based vector fonts as line-segment plots.

Strokeplot lays out skeleton (Hershey-style) glyphs, which are made only of
straight polylines, and emits them as drawing commands for a plotting backend.
It can produce a sample sheet of a whole font or a single line of text.

Example:
    $ strokeplot simplex-demo 'HELLO 2024' | gnuplot -p

This will plot the text using the built-in demo font.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
