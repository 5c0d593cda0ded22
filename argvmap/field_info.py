import dataclasses
import typing
from typing import Any, ClassVar

import attrs
from attrs import field

from argvmap.annotations import is_attrs, is_dataclass, split_annotated
from argvmap.exceptions import InvalidDestTypeError
from argvmap.tag import ANNOTATION_TAG, Tag, parse_tag
from argvmap.types import Bits


@attrs.define
class FieldInfo:
    """Static view of a single record field."""

    name: str
    """Python attribute name."""

    annotation: Any = field(kw_only=True)
    """Type hint as declared, including ``Annotated`` metadata."""

    raw_tag: str = field(default="", kw_only=True)

    ###################
    # Class Variables #
    ###################
    PRIVATE_PREFIX: ClassVar[str] = "_"

    @property
    def hint(self) -> Any:
        """Annotation with ``Annotated`` and ``Optional`` resolved."""
        return split_annotated(self.annotation)[0]

    @property
    def metadata(self) -> tuple[Any, ...]:
        return split_annotated(self.annotation)[1]

    @property
    def tag(self) -> tuple[str, bool]:
        return parse_tag(self.raw_tag)

    @property
    def tag_name(self) -> str:
        return self.tag[0]

    @property
    def optional(self) -> bool:
        return self.tag[1]

    @property
    def bits(self) -> Bits | None:
        for x in self.metadata:
            if isinstance(x, Bits):
                return x
        return None

    @property
    def is_accessible(self) -> bool:
        return not self.name.startswith(self.PRIVATE_PREFIX)

    @property
    def is_dynamic(self) -> bool:
        """Field accepts values of any type."""
        return self.hint is Any

    def is_writable(self, instance) -> bool:
        """Probe whether the field can be assigned on ``instance``.

        The current value is written back; frozen records reject this with
        an :exc:`AttributeError` subclass.
        """
        try:
            current = getattr(instance, self.name)
        except AttributeError:
            return True
        try:
            setattr(instance, self.name, current)
        except AttributeError:
            return False
        return True


def _type_hints(hint) -> dict[str, Any]:
    try:
        return typing.get_type_hints(hint, include_extras=True)
    except NameError as e:
        # String annotations naming a type that is not visible from the record's module.
        raise InvalidDestTypeError(msg=f"cannot resolve type hints of {hint.__qualname__}: {e}") from e


def _raw_tag(annotation, metadata) -> str:
    for x in split_annotated(annotation)[1]:
        if isinstance(x, Tag):
            return x.raw
    return metadata.get(ANNOTATION_TAG, "") if metadata else ""


def _dataclass_field_infos(hint) -> list[FieldInfo]:
    type_hints = _type_hints(hint)
    out = []
    for f in dataclasses.fields(hint):
        annotation = type_hints.get(f.name, f.type)
        out.append(FieldInfo(f.name, annotation=annotation, raw_tag=_raw_tag(annotation, f.metadata)))
    return out


def _attrs_field_infos(hint) -> list[FieldInfo]:
    type_hints = _type_hints(hint)
    out = []
    for attribute in attrs.fields(hint):
        annotation = type_hints.get(attribute.name, attribute.type)
        if annotation is None:
            # ``attrs.field()`` without annotation.
            annotation = Any
        out.append(FieldInfo(attribute.name, annotation=annotation, raw_tag=_raw_tag(annotation, attribute.metadata)))
    return out


def get_field_infos(hint) -> list[FieldInfo]:
    """Fields of a record type, in declaration order."""
    if is_dataclass(hint):
        return _dataclass_field_infos(hint)
    elif is_attrs(hint):
        return _attrs_field_infos(hint)
    else:
        raise TypeError(f"{hint!r} is not a dataclass or attrs class.")
