import logging
import shlex
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from attrs import define, field

import argvmap.registry
from argvmap._convert import get_converter
from argvmap.annotations import is_record
from argvmap.exceptions import (
    EmptyArgsError,
    InvalidDestError,
    InvalidDestTypeError,
    InvalidParameterCountError,
    InvalidValueError,
    MissingValueError,
    NotSupportedError,
    ReadOnlyError,
)
from argvmap.field_info import FieldInfo, get_field_infos
from argvmap.registry import Registry

logger = logging.getLogger(__name__)

_IMMUTABLE_TYPES = (type(None), bool, int, float, complex, str, bytes, tuple, frozenset, range)


def strip_prefix(token: str) -> str:
    """Remove a leading ``--``, else a leading ``-``."""
    if token.startswith("--"):
        return token[2:]
    elif token.startswith("-"):
        return token[1:]
    return token


def normalize_tokens(tokens: None | str | Iterable[str]) -> list[str]:
    if tokens is None:
        return []
    elif isinstance(tokens, str):
        return shlex.split(tokens)
    else:
        return list(tokens)


def tokenize(tokens: Sequence[str]) -> dict[str, str]:
    """Pair up ``name value`` tokens into a mapping.

    Name prefixes (``-``/``--``) are stripped; a repeated name keeps its last value.

    Raises
    ------
    InvalidParameterCountError
        Odd number of tokens.
    """
    if len(tokens) % 2:
        raise InvalidParameterCountError
    return {strip_prefix(tokens[i]): tokens[i + 1] for i in range(0, len(tokens), 2)}


def _check_dest(dest: Any) -> None:
    if isinstance(dest, type) or isinstance(dest, _IMMUTABLE_TYPES):
        raise InvalidDestError
    if not is_record(type(dest)):
        raise InvalidDestTypeError


def _descend(registry: Registry, info: FieldInfo) -> bool:
    return is_record(info.hint) and not registry.is_reserved(info.hint)


def _nested_record(dest: Any, info: FieldInfo) -> Any:
    """Get the record instance stored on ``dest``, building an empty one if unset."""
    value = getattr(dest, info.name, None)
    if value is not None:
        return value

    try:
        value = info.hint()
    except TypeError as e:
        raise InvalidDestError(msg=f"cannot build nested record {info.name!r}: {e}") from e
    try:
        setattr(dest, info.name, value)
    except AttributeError as e:
        raise ReadOnlyError(field_name=info.name) from e
    return value


def _convert(registry: Registry, info: FieldInfo, name: str, raw: str) -> Any:
    converter = get_converter(info.hint, info.bits) or registry.get_parser(info.hint)
    if converter is None:
        raise NotSupportedError(field_name=name)
    try:
        return converter(raw)
    except Exception as e:
        raise InvalidValueError(field_name=name, cause=e) from e


def populate(dest: Any, args: Mapping[str, str], *, registry: Registry | None = None) -> None:
    """Write values from ``args`` into the tagged fields of ``dest``.

    Nested records are descended into and populated from the same ``args``.
    The first error aborts; fields written before it keep their new values.

    Parameters
    ----------
    dest: Any
        Dataclass or attrs instance to populate.
    args: Mapping[str, str]
        Flag name to raw string value.
    registry: Registry | None
        Custom coercions and reserved types.
        Defaults to :data:`~argvmap.registry.default_registry`.
    """
    if not args:
        return
    if registry is None:
        registry = argvmap.registry.default_registry

    _check_dest(dest)

    for info in get_field_infos(type(dest)):
        if _descend(registry, info):
            populate(_nested_record(dest, info), args, registry=registry)
            continue

        name, optional = info.tag
        if not name or not info.is_accessible:
            continue
        if not info.is_dynamic and not info.is_writable(dest):
            raise ReadOnlyError(field_name=name)

        try:
            raw = args[name]
        except KeyError:
            if optional:
                continue
            raise MissingValueError(field_name=name) from None

        value = _convert(registry, info, name, raw)
        try:
            setattr(dest, info.name, value)
        except AttributeError as e:
            raise ReadOnlyError(field_name=name) from e
        except (TypeError, ValueError) as e:
            raise InvalidValueError(field_name=name, cause=e) from e


def parse_argv(dest: Any, tokens: None | str | Iterable[str], *, registry: Registry | None = None) -> None:
    """Populate ``dest`` from CLI-style ``--name value`` tokens.

    Parameters
    ----------
    dest: Any
        Dataclass or attrs instance to populate.
    tokens: None | str | Iterable[str]
        Alternating flag/value tokens.
        A string is split with :func:`shlex.split`.
    registry: Registry | None
        Custom coercions and reserved types.
        Defaults to :data:`~argvmap.registry.default_registry`.

    Raises
    ------
    EmptyArgsError
        No tokens were given.
    InvalidParameterCountError
        Tokens don't pair up.
    """
    tokens = normalize_tokens(tokens)
    if not tokens:
        raise EmptyArgsError
    logger.debug("Parsing %d tokens into %s.", len(tokens), type(dest).__name__)
    populate(dest, tokenize(tokens), registry=registry)


def _names(registry: Registry, hint: type) -> list[str]:
    result = []
    for info in get_field_infos(hint):
        if _descend(registry, info):
            result.extend(_names(registry, info.hint))
        elif info.tag_name and info.is_accessible:
            result.append(info.tag_name)
    return result


def parse_names(dest: Any, *, registry: Registry | None = None) -> list[str]:
    """All tag names declared on ``dest`` and its nested records, in field order.

    Repeated names are not removed.
    """
    if registry is None:
        registry = argvmap.registry.default_registry
    _check_dest(dest)
    logger.debug("Collecting argument names of %s.", type(dest).__name__)
    return _names(registry, type(dest))


@define
class ArgvParser:
    """Argument mapper bound to its own :class:`~argvmap.registry.Registry`."""

    registry: Registry = field(factory=Registry)

    def add_parser(self, type_, fn) -> None:
        self.registry.add_parser(type_, fn)

    def add_reserved_type(self, type_) -> None:
        self.registry.add_reserved_type(type_)

    def parse_argv(self, dest: Any, tokens: None | str | Iterable[str]) -> None:
        parse_argv(dest, tokens, registry=self.registry)

    def parse_names(self, dest: Any) -> list[str]:
        return parse_names(dest, registry=self.registry)
