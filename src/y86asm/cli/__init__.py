"""
y86asm Command-Line Interface
=============================

- **y86asm**: Y86 assembler

Implemented as a Click-based CLI application.
"""

__all__ = ["y86asm"]
