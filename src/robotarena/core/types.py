"""Core type definitions for robotarena."""

from typing import TypeVar

from typing_extensions import TypeAliasType

T = TypeVar("T")

Copy = TypeAliasType("Copy", T, type_params=(T,))
"""Type alias indicating a value is a detached copy.

When you see `Copy[T]` in a return type, mutating the returned value does NOT
affect the arena. Arena.records() returns copies of this kind.
"""
