from typing import Annotated

from argvmap.utils import frozen

__all__ = [
    "Bits",
    "Int",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "UInt",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "Float32",
    "Float64",
]


@frozen
class Bits:
    """Bit-width annotation for numeric fields."""

    size: int
    signed: bool = True


Int8 = Annotated[int, Bits(8)]
"A signed 8-bit integer."
Int16 = Annotated[int, Bits(16)]
"A signed 16-bit integer."
Int32 = Annotated[int, Bits(32)]
"A signed 32-bit integer."
Int64 = Annotated[int, Bits(64)]
"A signed 64-bit integer."
Int = Int64
"A signed machine-width integer. Plain :class:`int` fields behave the same way."

UInt8 = Annotated[int, Bits(8, signed=False)]
"An unsigned 8-bit integer."
UInt16 = Annotated[int, Bits(16, signed=False)]
"An unsigned 16-bit integer."
UInt32 = Annotated[int, Bits(32, signed=False)]
"An unsigned 32-bit integer."
UInt64 = Annotated[int, Bits(64, signed=False)]
"An unsigned 64-bit integer."
UInt = UInt64
"An unsigned machine-width integer."

Float32 = Annotated[float, Bits(32)]
"A single-precision float."
Float64 = Annotated[float, Bits(64)]
"A double-precision float. Plain :class:`float` fields behave the same way."
