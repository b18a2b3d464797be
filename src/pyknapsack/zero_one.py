"""
Dynamic-programming solver for the 0/1 knapsack problem.

Copyright by Gabriel A. Hackebeil (gabe.hackebeil@gmail.com).
"""
import numbers

import numpy

from pyknapsack.common import (TableStrategy,
                               InvalidItem,
                               InvalidCapacity,
                               ResourceExceeded)
from pyknapsack.configuration import config
from pyknapsack.misc import _cast_to_integral
from pyknapsack.problem import ProblemInstance
from pyknapsack.results import ZeroOneResult

_int64_max = numpy.iinfo(numpy.int64).max

def _table_dtype(values):
    """Returns the numpy dtype used to store table values.
    Integral values are stored as int64 when their sum
    cannot overflow, as Python ints when it can, and
    floating-point values are stored as float64."""
    if all(isinstance(v, numbers.Integral) for v in values):
        if sum(values) <= _int64_max:
            return numpy.int64
        return object
    return numpy.float64

def _fill_full_table(weights, values, capacity, dtype):
    n = len(weights)
    dp = numpy.zeros((n+1, capacity+1), dtype=dtype)
    for i in range(1, n+1):
        wt = weights[i-1]
        prev = dp[i-1]
        row = dp[i]
        row[:] = prev
        if wt <= capacity:
            row[wt:] = numpy.maximum(prev[wt:],
                                     prev[:capacity+1-wt] + values[i-1])
    return dp

def _traceback_full_table(dp, weights, capacity):
    selected = []
    w = capacity
    i = len(weights)
    while (i > 0) and (w > 0):
        # ties favor leaving the item out
        if dp[i, w] != dp[i-1, w]:
            selected.append(i-1)
            w -= weights[i-1]
        i -= 1
    selected.reverse()
    return selected

def _solve_full(weights, values, capacity, dtype):
    dp = _fill_full_table(weights, values, capacity, dtype)
    selected = _traceback_full_table(dp, weights, capacity)
    return dp[len(weights), capacity], selected

def _solve_compact(weights, values, capacity, dtype):
    n = len(weights)
    row = numpy.zeros(capacity+1, dtype=dtype)
    # taken[i, w] is True when item i strictly improved the
    # best value for bound w, which is exactly when the full
    # table satisfies dp[i+1][w] != dp[i][w]
    taken = numpy.zeros((n, capacity+1), dtype=bool)
    for i in range(n):
        wt = weights[i]
        if wt > capacity:
            continue
        candidate = row[:capacity+1-wt] + values[i]
        improved = candidate > row[wt:]
        taken[i, wt:] = improved
        row[wt:] = numpy.where(improved, candidate, row[wt:])
    selected = []
    w = capacity
    i = n
    while (i > 0) and (w > 0):
        if taken[i-1, w]:
            selected.append(i-1)
            w -= weights[i-1]
        i -= 1
    selected.reverse()
    return row[capacity], selected

_strategies = {TableStrategy.full: _solve_full,
               TableStrategy.compact: _solve_compact}

def check_table_size(item_count,
                     capacity,
                     max_table_cells=None,
                     max_capacity=None):
    """Raises ResourceExceeded if an instance with the given
    number of items and capacity exceeds the table limits.

    Both table strategies allocate (item_count + 1) *
    (capacity + 1) cells: the full strategy as one value
    table, the compact strategy as one value row plus a
    row of flags per item. An instance with no items or a
    zero capacity needs no table, but its capacity is still
    checked against the capacity limit.

    Parameters
    ----------
    item_count : int
        The number of items in the instance.
    capacity : int
        The integral capacity of the instance.
    max_table_cells : int, optional
        The largest table allowed. If None, the value of
        ``config.MAX_TABLE_CELLS`` is used. (default: None)
    max_capacity : int, optional
        The largest capacity allowed, with 0 meaning no
        limit. If None, the value of ``config.MAX_CAPACITY``
        is used. (default: None)

    Returns
    -------
    int
        The number of table cells required (0 when no table
        is needed).
    """
    if max_table_cells is None:
        max_table_cells = config.MAX_TABLE_CELLS
    if max_capacity is None:
        max_capacity = config.MAX_CAPACITY
    if (max_capacity > 0) and \
       (capacity > max_capacity):
        raise ResourceExceeded(
            "Capacity %s exceeds the maximum accepted "
            "capacity of %s." % (capacity, max_capacity),
            limit=max_capacity)
    if (item_count == 0) or (capacity == 0):
        return 0
    cells = (item_count + 1) * (capacity + 1)
    if cells > max_table_cells:
        raise ResourceExceeded(
            "The dynamic-programming table for %s items and "
            "capacity %s requires %s cells, which exceeds "
            "the limit of %s."
            % (item_count, capacity, cells, max_table_cells),
            cells=cells,
            limit=max_table_cells)
    return cells

def solve_zero_one(items,
                   capacity,
                   table=None,
                   max_table_cells=None,
                   max_capacity=None):
    """Solves the 0/1 knapsack problem, where each item is
    either taken whole or left out, using dynamic
    programming.

    The table entry dp[i][w] holds the best value
    achievable using the first i items under the weight
    bound w. The selected items are recovered by walking
    the table backward from dp[n][capacity]. When taking
    or leaving an item yield the same value, the item is
    left out, so a single optimal selection is returned
    deterministically.

    Parameters
    ----------
    items : iterable
        Objects with `index`, `value`, and `weight`
        attributes (e.g., :class:`pyknapsack.problem.Item`).
        All weights must be integral.
    capacity : int
        The nonnegative integral capacity of the knapsack.
    table : str, optional
        The :class:`TableStrategy
        <pyknapsack.common.TableStrategy>` used to store
        the table. If None, the value of
        ``config.TABLE_STRATEGY`` is used. (default: None)
    max_table_cells : int, optional
        The largest table allowed. If None, the value of
        ``config.MAX_TABLE_CELLS`` is used. (default: None)
    max_capacity : int, optional
        The largest capacity allowed, with 0 meaning no
        limit. If None, the value of ``config.MAX_CAPACITY``
        is used. (default: None)

    Returns
    -------
    :class:`ZeroOneResult <pyknapsack.results.ZeroOneResult>`

    Raises
    ------
    InvalidItem
        If any item has a weight that is not a positive
        integer.
    InvalidCapacity
        If the capacity is negative or not integral.
    ResourceExceeded
        If the table would exceed the configured limits.
    """
    instance = ProblemInstance(capacity=capacity, items=items)
    if table is None:
        table = config.TABLE_STRATEGY
    table = TableStrategy(table)
    W = _cast_to_integral(instance.capacity)
    if W is None:
        raise InvalidCapacity(
            "The 0/1 solver requires an integral capacity, "
            "got %r." % (instance.capacity,),
            capacity=instance.capacity)
    weights = []
    values = []
    for item in instance.items:
        wt = _cast_to_integral(item.weight)
        if wt is None:
            raise InvalidItem(
                "Item[%s] weight must be integral for the 0/1 "
                "solver, got %r." % (item.index, item.weight),
                index=item.index, field="weight")
        weights.append(wt)
        values.append(item.value)
    cells = check_table_size(len(weights),
                             W,
                             max_table_cells=max_table_cells,
                             max_capacity=max_capacity)
    dtype = _table_dtype(values)
    if cells == 0:
        return ZeroOneResult(
            max_value=0.0 if (dtype is numpy.float64) else 0)
    try:
        max_value, selected = _strategies[table](weights,
                                                 values,
                                                 W,
                                                 dtype)
    except MemoryError as e:                      #pragma:nocover
        raise ResourceExceeded(
            "Failed to allocate the dynamic-programming table "
            "for %s items and capacity %s."
            % (len(weights), W)) from e
    if dtype is numpy.float64:
        max_value = float(max_value)
    else:
        max_value = int(max_value)
    return ZeroOneResult(
        max_value=max_value,
        total_weight=sum(weights[i] for i in selected),
        selected_indices=tuple(int(instance.items[i].index)
                               for i in selected))
