"""To prevent circular dependencies, this module should never import anything else from argvmap."""

import functools
from typing import TYPE_CHECKING, Any, get_origin

# https://threeofwands.com/attra-iv-zero-overhead-frozen-attrs-classes/
if TYPE_CHECKING:
    from attrs import frozen
else:
    from attrs import define

    frozen = functools.partial(define, unsafe_hash=True)


def type_id(type_: Any) -> str:
    """Fully-qualified name of a type.

    Builtins are returned without the ``builtins.`` prefix.
    Strings are assumed to already be identifiers and are returned unchanged.

    Example
    -------
    >>> type_id(int)
    'int'
    >>> from datetime import datetime
    >>> type_id(datetime)
    'datetime.datetime'
    """
    if isinstance(type_, str):
        return type_
    if get_origin(type_) is not None:
        # Parametrized generics proxy attribute access to their origin.
        return repr(type_)

    module = getattr(type_, "__module__", None)
    name = getattr(type_, "__qualname__", None) or getattr(type_, "__name__", None) or getattr(type_, "_name", None)
    if name is None:
        # Other typing constructs.
        return repr(type_)
    if module in (None, "builtins"):
        return name
    return f"{module}.{name}"
