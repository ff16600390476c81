"""A tool for applying a piece of logic at a fixed depth of an arbitrary python
data structure of nested lists. Example usage:

    @walks_to_depth(2)
    def shout(value):
        return value.upper()

    shout([["a", "b"], ["c"]])
    #=> [["A", "B"], ["C"]]

Only lists are descended into; tuples, dicts, strings and everything else are
handed to the wrapped function as they are. Reaching such a value before the
requested depth raises StructureMismatchError.
"""
import functools


class LiftError(Exception):
    """Base class for usage errors raised while lifting a function."""
    pass


class InvalidDepthError(LiftError, ValueError):
    """Raised when the requested depth is not a non-negative integer."""
    pass


class StructureMismatchError(LiftError, TypeError):
    """Raised when a non-list is found where another layer of nesting is required."""
    def __init__(self, value, path, level):
        self.value = value
        self.path = path
        self.depth = len(path)
        self.level = level
        super().__init__(
            'Expected a list at path %s to descend %d level(s), found %s at depth %d'
            % (list(path), level, type(value).__name__, self.depth)
        )


def validate_level(level):
    # bool is an int subclass, but walks_to_depth(True) is always a mistake.
    if isinstance(level, bool) or not isinstance(level, int):
        raise InvalidDepthError('Depth must be an integer, got %r' % (level,))
    if level < 0:
        raise InvalidDepthError('Depth must be non-negative, got %d' % level)

    return level


def walks_to_depth(level):
    """Decorator factory: the decorated function receives each value found
    `level` lists deep, and the result replaces that value in a freshly built
    copy of the surrounding lists. With `level == 0` the function is called
    on the whole argument.

    The depth is checked here, before any data is seen: an invalid depth
    fails at decoration time rather than on the first call.
    """
    validate_level(level)

    def decorator(fn):
        @functools.wraps(fn)
        def wrapper(value):
            return _descend(fn, value, level, ())

        wrapper.level = level
        return wrapper

    return decorator


def _descend(fn, value, remaining, path):
    if remaining == 0:
        return fn(value)

    if not isinstance(value, list):
        raise StructureMismatchError(value, path, len(path) + remaining)

    return [_descend(fn, v, remaining - 1, path + (i,)) for i, v in enumerate(value)]
