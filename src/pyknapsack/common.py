"""
Basic definitions and utilities.

Copyright by Gabriel A. Hackebeil (gabe.hackebeil@gmail.com).
"""

import enum

@enum.unique
class TableStrategy(str, enum.Enum):
    """Strategies for storing the dynamic-programming
    table used by the 0/1 solver. Both strategies return
    identical results, including the tie-breaking rule of
    the traceback."""

    full = "full"
    """The complete (n+1) x (capacity+1) value table is
    retained and walked backward to recover the selected
    items."""
    compact = "compact"
    """A single row of values is retained along with an
    n x (capacity+1) boolean matrix recording whether each
    item improved the value at each weight bound. This
    uses a fraction of the memory required by the full
    table."""

class KnapsackError(ValueError):
    """Base class for errors raised when a knapsack
    instance cannot be solved."""

class InvalidItem(KnapsackError):
    """Raised when an item is malformed (e.g., a weight
    that is not positive).

    Attributes
    ----------
    index : int or None
        The index of the offending item, when known.
    field : str or None
        The name of the offending item field, when known.
    """

    def __init__(self, message, index=None, field=None):
        super(InvalidItem, self).__init__(message)
        self.index = index
        self.field = field

class InvalidCapacity(KnapsackError):
    """Raised when a capacity is negative or otherwise
    unusable by a solver.

    Attributes
    ----------
    capacity : object
        The rejected capacity.
    """

    def __init__(self, message, capacity=None):
        super(InvalidCapacity, self).__init__(message)
        self.capacity = capacity

class ResourceExceeded(KnapsackError):
    """Raised when the dynamic-programming table for an
    instance would exceed the configured limits.

    Attributes
    ----------
    cells : int or None
        The number of table cells that would have been
        allocated.
    limit : int or None
        The limit that was exceeded.
    """

    def __init__(self, message, cells=None, limit=None):
        super(ResourceExceeded, self).__init__(message)
        self.cells = cells
        self.limit = limit

class SchemaError(KnapsackError):
    """Raised when an instance document (e.g., a request
    body) violates the expected schema."""
