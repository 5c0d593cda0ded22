from attrs import define, field

__all__ = [
    "ArgvError",
    "ConversionError",
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
]


class ConversionError(ValueError):
    """A raw argument string could not be converted by a built-in coercion."""

    reason = "invalid value"

    def __init__(self, func: str, value: str):
        self.func = func
        self.value = value
        super().__init__(f'{func}: parsing "{value}": {self.reason}')


class InvalidSyntaxError(ConversionError):
    """The raw string is not a valid literal of the target type."""

    reason = "invalid syntax"


class OutOfRangeError(ConversionError):
    """The raw string is a valid literal, but exceeds the bit-width of the target type."""

    reason = "value out of range"


@define
class ArgvError(Exception):
    """Root exception for runtime errors.

    Every error aborts the current ``parse_argv``/``parse_names`` call.
    """

    msg: str | None = None
    """
    If set, override automatic message generation.
    """

    default_msg = ""

    def __str__(self):
        if self.msg is not None:
            return self.msg
        return self.default_msg


@define
class EmptyArgsError(ArgvError):
    """No tokens were provided to :func:`parse_argv`."""

    default_msg = "empty argument list"


@define
class InvalidParameterCountError(ArgvError):
    """Tokens do not pair up into ``name value`` couples."""

    default_msg = "invalid parameter count"


@define
class InvalidDestError(ArgvError):
    """Destination is not a mutable record instance."""

    default_msg = "dest must be a record instance"


@define
class InvalidDestTypeError(ArgvError):
    """Destination is an object, but not a structured record."""

    default_msg = "invalid argument type; dest must be a dataclass or attrs record"


@define(kw_only=True)
class FieldError(ArgvError):
    """Root exception for errors bound to a single tagged field."""

    field_name: str
    """Tag name of the offending field."""


@define(kw_only=True)
class ReadOnlyError(FieldError):
    """Tagged field exists, but cannot be written."""

    def __str__(self):
        return self.msg or f"field {self.field_name} is not settable"


@define(kw_only=True)
class MissingValueError(FieldError):
    """A required tagged field has no corresponding argument."""

    def __str__(self):
        return self.msg or f"value for arg '{self.field_name}' is missing"


@define(kw_only=True)
class InvalidValueError(FieldError):
    """Coercion of the supplied raw value failed."""

    cause: BaseException | None = field(default=None)
    """Underlying conversion error."""

    def __str__(self):
        return self.msg or f"error parsing arg {self.field_name}: {self.cause}"


@define(kw_only=True)
class NotSupportedError(FieldError):
    """Field's type has neither a built-in nor a registered coercion."""

    def __str__(self):
        return self.msg or f"non-supported type on arg {self.field_name}"
