"""Core implementation of the lift API: mapping a function over nested lists
at a chosen level of nesting while preserving the shape around it.

    lmap([[1, 2], [3, 4], [5, 6]], 2, lambda i: i * 10)
    #=> [[10, 20], [30, 40], [50, 60]]

The name comes from "lifting" a function through nested functors, much like
composing `fmap . fmap`: `lift(2)(fn)` is `fn` made to work two lists deep.

Public API:

    * lmap(nested, level, fn)       the general version, any level >= 0
    * l2map .. l5map(nested, fn)    lmap at a fixed level of 2 to 5
    * lift(level)                   decorator form of lmap

Usage errors raise subclasses of LiftError (see walk.py). Whatever `fn`
raises is not caught and reaches the caller as is.
"""
from .walk import walks_to_depth
from .walk import LiftError, InvalidDepthError, StructureMismatchError  # noqa: F401

import logging
logger = logging.getLogger('lift')


def lift(level):
    """Decorator turning a function on elements into a function on lists
    nested `level` deep. Example:

        @lift(3)
        def capitalize(word):
            return word.capitalize()

        capitalize([[["hello", "world"], ["foo"]], [["bar"], ["baz", "qux"]]])
        #=> [[["Hello", "World"], ["Foo"]], [["Bar"], ["Baz", "Qux"]]]
    """
    return walks_to_depth(level)


def lmap(nested, level, fn):
    """Maps `fn` over `nested` at the given level of nesting and returns a new
    nested list of the same shape. `level == 0` calls `fn(nested)` once.

    Raises InvalidDepthError for a negative or non-integer level, and
    StructureMismatchError when `nested` is not nested `level` lists deep.
    """
    mapper = walks_to_depth(level)(fn)
    logger.debug('Mapping %s over %d level(s) of nesting' % (getattr(fn, '__name__', fn), level))
    return mapper(nested)


def l2map(nested, fn):
    """Equivalent to lmap(nested, 2, fn)."""
    return lmap(nested, 2, fn)


def l3map(nested, fn):
    """Equivalent to lmap(nested, 3, fn)."""
    return lmap(nested, 3, fn)


def l4map(nested, fn):
    """Equivalent to lmap(nested, 4, fn)."""
    return lmap(nested, 4, fn)


def l5map(nested, fn):
    """Equivalent to lmap(nested, 5, fn)."""
    return lmap(nested, 5, fn)
