from attrs import field

from argvmap.utils import frozen

ANNOTATION_TAG = "argv"
"""Field metadata key holding a raw tag string."""

OPTIONAL_MARKER = "optional"


def parse_tag(tag: str) -> tuple[str, bool]:
    """Split a raw tag string into its name and optional flag.

    Only the exact second segment ``optional`` marks a field as optional;
    any other content leaves the field required.

    Example
    -------
    >>> parse_tag("days,optional")
    ('days', True)
    >>> parse_tag("days,sometimes")
    ('days', False)
    """
    if not tag:
        return "", False
    tokens = tag.split(",")
    if len(tokens) == 1:
        return tokens[0], False
    return tokens[0], tokens[1] == OPTIONAL_MARKER


@frozen
class Tag:
    """Declare a record field's external flag name.

    .. code-block:: python

        @dataclass
        class CertInfo:
            common_name: Annotated[str, Tag("CN")] = ""
            organization: Annotated[str, Tag("O,optional")] = ""
    """

    raw: str = field(default="")

    @property
    def name(self) -> str:
        return parse_tag(self.raw)[0]

    @property
    def optional(self) -> bool:
        return parse_tag(self.raw)[1]
