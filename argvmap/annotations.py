from dataclasses import is_dataclass as _is_dataclass
from types import UnionType
from typing import Annotated, Any, List, Union, get_args, get_origin

import attrs

# from types import NoneType is available >=3.10
NoneType = type(None)
AnnotatedType = type(Annotated[int, 0])

STRING_LIST_TYPES = frozenset({list[str], List[str]})


def is_nonetype(hint):
    return hint is NoneType


def is_union(type_: type | None) -> bool:
    """Checks if a type is a union."""
    if type_ is Union or type_ is UnionType:
        return True

    # The ``get_origin`` call is relatively expensive, so we'll check common types
    # that are passed in here to see if we can avoid calling ``get_origin``.
    if type_ is str or type_ is int or type_ is float or type_ is bool or is_annotated(type_):
        return False
    origin = get_origin(type_)
    return origin is Union or origin is UnionType


def is_annotated(hint) -> bool:
    return type(hint) is AnnotatedType


def is_dataclass(hint) -> bool:
    return isinstance(hint, type) and _is_dataclass(hint)


def is_attrs(hint) -> bool:
    return isinstance(hint, type) and attrs.has(hint)


def is_record(hint) -> bool:
    """A record is a dataclass or an attrs class."""
    return is_dataclass(hint) or is_attrs(hint)


def is_string_list(hint) -> bool:
    return hint in STRING_LIST_TYPES


def resolve_optional(type_: Any) -> Any:
    """Only resolves Union's of None + one other type (i.e. Optional)."""
    # Python will automatically flatten out nested unions when possible.
    if not is_union(type_):
        return type_

    non_none_types = [t for t in get_args(type_) if not is_nonetype(t)]
    if len(non_none_types) == 1:
        return non_none_types[0]
    return type_


def split_annotated(type_: Any) -> tuple[Any, tuple[Any, ...]]:
    """Separate a hint into its underlying type and its ``Annotated`` metadata.

    ``Optional`` is resolved on both sides of the ``Annotated`` wrapper.
    """
    type_ = resolve_optional(type_)
    if not is_annotated(type_):
        return type_, ()
    inner, *metadata = get_args(type_)
    return resolve_optional(inner), tuple(metadata)
