__version__ = "0.1.0"

__all__ = [
    "ArgvError",
    "ArgvPanel",
    "ArgvParser",
    "EmptyArgsError",
    "FieldError",
    "InvalidDestError",
    "InvalidDestTypeError",
    "InvalidParameterCountError",
    "InvalidSyntaxError",
    "InvalidValueError",
    "MissingValueError",
    "NotSupportedError",
    "OutOfRangeError",
    "ReadOnlyError",
    "Registry",
    "Tag",
    "add_parser",
    "add_reserved_type",
    "default_registry",
    "parse_argv",
    "parse_names",
    "parse_tag",
    "print_available",
    "print_error",
    "tokenize",
    "types",
]

from argvmap import types
from argvmap.core import ArgvParser, parse_argv, parse_names, tokenize
from argvmap.exceptions import (
    ArgvError,
    EmptyArgsError,
    FieldError,
    InvalidDestError,
    InvalidDestTypeError,
    InvalidParameterCountError,
    InvalidSyntaxError,
    InvalidValueError,
    MissingValueError,
    NotSupportedError,
    OutOfRangeError,
    ReadOnlyError,
)
from argvmap.panel import ArgvPanel, print_available, print_error
from argvmap.registry import Registry, add_parser, add_reserved_type, default_registry
from argvmap.tag import Tag, parse_tag
