import logging
from collections.abc import Callable
from typing import Any

from attrs import define, field

from argvmap.utils import type_id

logger = logging.getLogger(__name__)

Parser = Callable[[str], Any]
"""Converts a raw argument string into a field value; raises on failure."""

DEFAULT_RESERVED_TYPES = ("datetime.datetime",)


@define
class Registry:
    """Custom coercions and reserved types consulted while mapping arguments.

    Register everything before parsing; a registry is not safe to mutate
    while another thread is parsing with it.
    """

    parsers: dict[str, Parser] = field(factory=dict)
    """Type identifier to conversion function."""

    reserved: list[str] = field(factory=lambda: list(DEFAULT_RESERVED_TYPES))
    """Type identifiers treated as leaf values even when they are records."""

    def add_parser(self, type_: type | str, fn: Parser) -> None:
        """Register ``fn`` to convert fields of type ``type_``.

        The last registration for a given type wins.
        """
        key = type_id(type_)
        logger.debug("Registering parser %r for %s.", fn, key)
        self.parsers[key] = fn

    def add_reserved_type(self, type_: type | str) -> None:
        """Treat ``type_`` as a leaf value; it will not be descended into."""
        key = type_id(type_)
        logger.debug("Registering reserved type %s.", key)
        self.reserved.append(key)

    def is_reserved(self, type_: type | str) -> bool:
        return type_id(type_) in self.reserved

    def get_parser(self, type_: type | str) -> Parser | None:
        return self.parsers.get(type_id(type_))

    def copy(self) -> "Registry":
        return type(self)(parsers=dict(self.parsers), reserved=list(self.reserved))


default_registry = Registry()
"""Process-wide registry used when no explicit registry is supplied."""


def add_parser(type_: type | str, fn: Parser) -> None:
    """Register a conversion function on the :data:`default_registry`."""
    default_registry.add_parser(type_, fn)


def add_reserved_type(type_: type | str) -> None:
    """Register a reserved type on the :data:`default_registry`."""
    default_registry.add_reserved_type(type_)
