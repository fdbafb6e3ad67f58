"""Sizing constants and bit helpers shared by the map implementation."""

MAXIMUM_CAPACITY = 1 << 30
"""Largest table capacity; a power of two."""

DEFAULT_CAPACITY = 16
"""Table capacity used when none is requested."""

MIN_TRANSFER_STRIDE = 16
"""Smallest number of bins one resizer claims at a time."""

RESIZE_STAMP_BITS = 16
"""Bits of the size-control word used for the resize generation stamp."""

MAX_RESIZERS = (1 << (32 - RESIZE_STAMP_BITS)) - 1
"""Largest number of workers that may help with one resize."""

RESIZE_STAMP_SHIFT = 32 - RESIZE_STAMP_BITS
"""Shift that places the resize stamp inside the size-control word."""

FORWARDING_NODE = -1
TREE_BIN_NODE = -2
RESERVATION_NODE = -3

LOAD_FACTOR = 0.75
"""Fill ratio at which the table grows."""

_UINT32_MASK = 0xFFFFFFFF


def next_power_of_two(x: int) -> int:
    """Return the smallest power of two >= x, clamped to [1, MAXIMUM_CAPACITY]."""
    if x <= 0:
        return 1
    if x >= MAXIMUM_CAPACITY:
        return MAXIMUM_CAPACITY
    return 1 << (x - 1).bit_length()


def number_of_leading_zeros(x: int) -> int:
    """Count the leading zero bits of x taken as an unsigned 32-bit value."""
    return 32 - (x & _UINT32_MASK).bit_length()


def resize_stamp(n: int) -> int:
    """Return the stamp bits identifying a resize of a table with n bins."""
    return number_of_leading_zeros(n) | (1 << (RESIZE_STAMP_BITS - 1))