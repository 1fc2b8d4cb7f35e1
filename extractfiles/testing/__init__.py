"""Testing utilities for extractfiles consumers."""

from .fixtures import TreeBuilder, assert_files_nulled

__all__ = ['TreeBuilder', 'assert_files_nulled']
