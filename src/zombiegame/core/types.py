"""Core type definitions for zombiegame."""

type Copy[T] = T
"""Type alias indicating a value is an independent deep copy.

When you see `Copy[T]` in a return type, nothing reachable from the returned value
is shared with the source. Mutations to it never show up on the original.
"""

type Alias[T] = T
"""Type alias indicating a value is the very same object that was passed in.

When you see `Alias[T]` in a return type, the returned value IS the argument.
Every mutation through it is a mutation of the original.
"""
