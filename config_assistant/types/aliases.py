from typing import Annotated

from annotated_types import Interval

# -------- Fixed-width integers (out-of-range values classify as overflow) --------
Int8 = Annotated[int, Interval(ge=-(2**7), le=2**7 - 1)]
Int16 = Annotated[int, Interval(ge=-(2**15), le=2**15 - 1)]
Int32 = Annotated[int, Interval(ge=-(2**31), le=2**31 - 1)]
Int64 = Annotated[int, Interval(ge=-(2**63), le=2**63 - 1)]
UInt8 = Annotated[int, Interval(ge=0, le=2**8 - 1)]
UInt16 = Annotated[int, Interval(ge=0, le=2**16 - 1)]
UInt32 = Annotated[int, Interval(ge=0, le=2**32 - 1)]
UInt64 = Annotated[int, Interval(ge=0, le=2**64 - 1)]

# Display names for error messages; Annotated aliases carry no __name__.
ALIAS_NAMES: dict[object, str] = {
    Int8: "Int8",
    Int16: "Int16",
    Int32: "Int32",
    Int64: "Int64",
    UInt8: "UInt8",
    UInt16: "UInt16",
    UInt32: "UInt32",
    UInt64: "UInt64",
}
