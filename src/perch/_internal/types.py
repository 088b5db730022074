"""Shared type aliases used across perch modules."""

from collections.abc import Awaitable, Callable
from typing import TypeAlias

# Child content source — produces the element's inner markup, possibly lazily
ChildContent: TypeAlias = Callable[[], Awaitable[str | None]]

# Ordered attribute pairs as authored on an element
AttributePairs: TypeAlias = tuple[tuple[str, str], ...]
