"""Pairwise intersection dispatch.

Each supported pair of types has exactly one function holding the algorithm,
registered with :func:`register`. The reverse order is served by a wrapper
that swaps the arguments, so ``intersect(a, b)`` and ``intersect(b, a)``
always run the same code.

Every pair also declares its result type: area-type pairs produce a
:class:`~overlap2d.geometry.types.Clump`, incidence-type pairs produce a
:class:`~overlap2d.geometry.types.Point`. ``None`` means no intersection.

Example:
    >>> from overlap2d import Circle, Point, intersect
    >>> a = Circle(Point(0, 0), 1.0)
    >>> b = Circle(Point(1, 0), 1.0)
    >>> intersect(a, b) == intersect(b, a)
    True
"""

import logging
from typing import Any, Callable, Dict, Optional, Tuple

logger = logging.getLogger(__name__)

IntersectFn = Callable[[Any, Any], Optional[Any]]

# (type_a, type_b) -> (function, output type). Filled at import time only.
_REGISTRY: Dict[Tuple[type, type], Tuple[IntersectFn, type]] = {}


class UnsupportedIntersection(TypeError):
    """No intersection algorithm is registered for a pair of types."""

    def __init__(self, type_a: type, type_b: type):
        super().__init__(
            f"no intersection registered between "
            f"{type_a.__name__} and {type_b.__name__}"
        )
        self.type_a = type_a
        self.type_b = type_b


def register(type_a: type, type_b: type, output: type):
    """Register the intersection algorithm for ``(type_a, type_b)``.

    The decorated function takes ``(a, b)`` and returns ``output`` or None.
    The mirrored pair ``(type_b, type_a)`` is registered with a wrapper that
    swaps the arguments.
    """
    def decorator(fn: IntersectFn) -> IntersectFn:
        if (type_a, type_b) in _REGISTRY:
            raise ValueError(
                f"intersection between {type_a.__name__} and "
                f"{type_b.__name__} is already registered"
            )
        _REGISTRY[(type_a, type_b)] = (fn, output)
        if type_a is not type_b:
            def swapped(b, a):
                return fn(a, b)
            swapped.__name__ = f"{fn.__name__}_swapped"
            swapped.__doc__ = fn.__doc__
            _REGISTRY[(type_b, type_a)] = (swapped, output)
        logger.debug(
            "Registered %s for %s x %s -> %s",
            fn.__name__, type_a.__name__, type_b.__name__, output.__name__,
        )
        return fn
    return decorator


def _lookup(type_a: type, type_b: type) -> Optional[Tuple[IntersectFn, type]]:
    for base_a in type_a.__mro__:
        for base_b in type_b.__mro__:
            entry = _REGISTRY.get((base_a, base_b))
            if entry is not None:
                return entry
    return None


def output_type(type_a: type, type_b: type) -> type:
    """Result type produced when intersecting ``type_a`` with ``type_b``."""
    entry = _lookup(type_a, type_b)
    if entry is None:
        raise UnsupportedIntersection(type_a, type_b)
    return entry[1]


def supports(type_a: type, type_b: type) -> bool:
    return _lookup(type_a, type_b) is not None


def intersect(a, b):
    """Intersect two geometric values.

    Returns:
        A Clump or a Point depending on the pair (see :func:`output_type`),
        or None when the two values do not intersect.

    Raises:
        UnsupportedIntersection: no algorithm exists for this pair of types.
    """
    entry = _lookup(type(a), type(b))
    if entry is None:
        raise UnsupportedIntersection(type(a), type(b))
    fn, _ = entry
    return fn(a, b)


class Intersectable:
    """Mixin giving ``a.intersect(b)`` and ``a & b``."""

    def intersect(self, other):
        return intersect(self, other)

    def __and__(self, other):
        if not supports(type(self), type(other)):
            return NotImplemented
        return intersect(self, other)

    def __rand__(self, other):
        if not supports(type(other), type(self)):
            return NotImplemented
        return intersect(other, self)
