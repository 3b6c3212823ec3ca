"""
Element capability protocols for pylinsys.

Matrix operations need different things from their element type, so each
operation group gets its own structural interface instead of one
monolithic numeric type:

    construction (new):       a callable element type producing a default
    equality:                 __eq__ (every Python object has it)
    scale_row:                SupportsMul
    add_scaled, substitute:   SupportsRowArithmetic (multiply and add)

We use Protocol (structural typing) rather than ABC (nominal typing) so
that int, float, Fraction, Decimal and numpy scalars all qualify without
registration.
"""

from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar('T')  # Element type


@runtime_checkable
class SupportsMul(Protocol):
    """Element that can be multiplied by another element."""

    def __mul__(self, other, /):
        ...


@runtime_checkable
class SupportsAdd(Protocol):
    """Element that can be added to another element."""

    def __add__(self, other, /):
        ...


@runtime_checkable
class SupportsRowArithmetic(SupportsMul, SupportsAdd, Protocol):
    """
    Element supporting the operations of an elementary row operation.

    Needed by add_scaled (R_j <- R_j + a * R_i) and by substitute (dot
    product accumulated from a zero value).
    """
    pass
