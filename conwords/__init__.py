"""Stochastic crossword generator over synonym dictionaries.

This package exposes the public API surface via:

- ``conwords.data.dictionary.compile_dictionaries``: builds the word indices.
- ``conwords.engine.generator.CrosswordGenerator``: seeds, iterates and
  completes a population of candidate grids.
- ``conwords.utils.pretty`` and ``conwords.io.clues``: rendering and export.
"""

from .data.dictionary import CompiledDictionary, DictionaryCompiler, compile_dictionaries
from .engine.generator import CrosswordGenerator, GeneratorConfig
from .engine.grid import Grid

__all__ = [
    "CompiledDictionary",
    "CrosswordGenerator",
    "DictionaryCompiler",
    "GeneratorConfig",
    "Grid",
    "compile_dictionaries",
]

__version__ = "0.1.0"
