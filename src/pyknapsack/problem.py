"""
Item and problem instance definitions.

Copyright by Gabriel A. Hackebeil (gabe.hackebeil@gmail.com).
"""
import math
import numbers
from dataclasses import dataclass

from pyknapsack.common import (InvalidItem,
                               InvalidCapacity)
from pyknapsack.misc import _is_number

def _check_item_fields(index, value, weight):
    """Raises InvalidItem if any of the given item fields
    violate the item model."""
    if isinstance(index, bool) or \
       (not isinstance(index, numbers.Integral)) or \
       (index < 1):
        raise InvalidItem(
            "Item index must be a positive integer, got %r."
            % (index,), index=index, field="index")
    if (not _is_number(value)) or \
       (not math.isfinite(value)) or \
       (value < 0):
        raise InvalidItem(
            "Item[%s] value must be a finite number >= 0, "
            "got %r." % (index, value),
            index=index, field="value")
    if (not _is_number(weight)) or \
       (not math.isfinite(weight)) or \
       (weight <= 0):
        raise InvalidItem(
            "Item[%s] weight must be a finite number > 0, "
            "got %r." % (index, weight),
            index=index, field="weight")

@dataclass(frozen=True)
class Item:
    """An item that may be placed in the knapsack.

    Attributes
    ----------
    index : int
        The 1-based identifier of the item. Must be unique
        within a problem instance.
    value : float or int
        The nonnegative value gained by taking the whole
        item.
    weight : float or int
        The positive capacity consumed by taking the whole
        item.
    """
    index: int
    value: float
    weight: float

    def __post_init__(self):
        _check_item_fields(self.index, self.value, self.weight)

@dataclass(frozen=True)
class ProblemInstance:
    """A knapsack problem instance.

    The items argument can be any iterable of objects
    exposing `index`, `value`, and `weight` attributes. It
    is copied into a tuple, so later changes to the
    caller's sequence do not affect the instance.

    Attributes
    ----------
    capacity : float or int
        The nonnegative capacity of the knapsack.
    items : tuple
        The items available for selection, in input order.
    """
    capacity: float
    items: tuple = ()

    def __post_init__(self):
        capacity = self.capacity
        if (not _is_number(capacity)) or \
           (not math.isfinite(capacity)) or \
           (capacity < 0):
            raise InvalidCapacity(
                "Capacity must be a finite number >= 0, "
                "got %r." % (capacity,),
                capacity=capacity)
        items = tuple(self.items)
        seen = set()
        for item in items:
            try:
                index = item.index
                value = item.value
                weight = item.weight
            except AttributeError:
                raise InvalidItem(
                    "Items must define index, value, and "
                    "weight attributes, got %r." % (item,))
            _check_item_fields(index, value, weight)
            if index in seen:
                raise InvalidItem(
                    "Item index %s is not unique." % (index),
                    index=index, field="index")
            seen.add(index)
        object.__setattr__(self, "items", items)

    @classmethod
    def from_pairs(cls, capacity, pairs):
        """Creates an instance from a sequence of (weight,
        value) pairs. Items are numbered starting from 1 in
        the order given.

        Example
        -------

        >>> instance = ProblemInstance.from_pairs(
        ...     50, [(10, 60), (20, 100), (30, 120)])
        >>> [item.index for item in instance.items]
        [1, 2, 3]

        """
        items = [Item(index=i, value=value, weight=weight)
                 for i, (weight, value) in enumerate(pairs, 1)]
        return cls(capacity=capacity, items=items)

    def __len__(self):
        return len(self.items)
