"""Compilers for reports generated from side-data."""

from .compiler import Compiler
from .instructions_compiler import InstructionsCompiler

__all__ = ["Compiler", "InstructionsCompiler"]
