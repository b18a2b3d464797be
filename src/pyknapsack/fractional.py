"""
Greedy solver for the fractional knapsack problem.

Copyright by Gabriel A. Hackebeil (gabe.hackebeil@gmail.com).
"""

from pyknapsack.problem import ProblemInstance
from pyknapsack.results import FractionalResult

def sort_by_ratio(items):
    """Returns a list of items sorted by decreasing
    value/weight ratio. Items with equal ratios keep their
    input order."""
    # sorted() is stable, and remains stable with reverse=True
    return sorted(items,
                  key=lambda item: item.value / item.weight,
                  reverse=True)

def solve_fractional(items, capacity):
    """Solves the fractional knapsack problem, where any
    fraction of an item may be taken.

    Items are taken whole in order of decreasing
    value/weight ratio until the next item no longer fits,
    at which point the fraction of that item that fills the
    remaining capacity is taken. This is optimal for the
    divisible-item model.

    Parameters
    ----------
    items : iterable
        Objects with `index`, `value`, and `weight`
        attributes (e.g., :class:`pyknapsack.problem.Item`).
    capacity : float or int
        The nonnegative capacity of the knapsack.

    Returns
    -------
    :class:`FractionalResult <pyknapsack.results.FractionalResult>`

    Raises
    ------
    InvalidItem
        If any item has a weight that is not positive.
    InvalidCapacity
        If the capacity is negative.
    """
    instance = ProblemInstance(capacity=capacity, items=items)
    total_value = 0.0
    remaining = float(instance.capacity)
    contributions = []
    for item in sort_by_ratio(instance.items):
        if remaining <= 0:
            break
        if item.weight <= remaining:
            total_value += item.value
            remaining -= item.weight
            contributions.append((int(item.index), 1.0))
        else:
            fraction = remaining / item.weight
            total_value += fraction * item.value
            contributions.append((int(item.index), float(fraction)))
            # the knapsack is now full
            break
    return FractionalResult(total_value=float(total_value),
                            contributions=tuple(contributions))
