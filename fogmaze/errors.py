# -*- coding: utf-8 -*-
"""Exceptions raised by maze generation and session setup."""
from __future__ import annotations


class MazeConfigError(ValueError):
    """Invalid size, algorithm, seed or level."""


class MazeGenerationError(RuntimeError):
    """A generated maze failed its connectivity check."""
