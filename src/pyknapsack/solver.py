"""
Knapsack solver implementation.

Copyright by Gabriel A. Hackebeil (gabe.hackebeil@gmail.com).
"""
import logging
import time

from pyknapsack.common import TableStrategy
from pyknapsack.misc import (time_format,
                             get_simple_logger)
from pyknapsack.problem import ProblemInstance
from pyknapsack.fractional import solve_fractional
from pyknapsack.zero_one import solve_zero_one
from pyknapsack.results import write_results

class _notset(object):
    pass

class Solver(object):
    """A knapsack solver that computes both the fractional
    and the 0/1 solution of an instance.

    Solver objects hold only options, so a single object
    can be used to solve any number of instances,
    including from multiple threads.

    Parameters
    ----------
    table : str, optional
        The :class:`TableStrategy
        <pyknapsack.common.TableStrategy>` used by the 0/1
        solver. If None, the value of
        ``config.TABLE_STRATEGY`` is used at solve
        time. (default: None)
    max_table_cells : int, optional
        The largest dynamic-programming table allowed. If
        None, the value of ``config.MAX_TABLE_CELLS`` is
        used at solve time. (default: None)
    max_capacity : int, optional
        The largest capacity accepted by the 0/1 solver,
        with 0 meaning no limit. If None, the value of
        ``config.MAX_CAPACITY`` is used at solve
        time. (default: None)
    log : ``logging.Logger``, optional
        A log object where solver output should be
        sent. If unset, the "pyknapsack" logger is
        used. (default: <unset>)
    """

    def __init__(self,
                 table=None,
                 max_table_cells=None,
                 max_capacity=None,
                 log=_notset):
        if table is not None:
            table = TableStrategy(table)
        self._table = table
        self._max_table_cells = max_table_cells
        self._max_capacity = max_capacity
        if log is _notset:
            log = logging.getLogger("pyknapsack")
        self._log = log

    @property
    def table(self):
        """The table strategy assigned to this solver (or
        None when the configured default is used)."""
        return self._table

    def solve_instance(self, instance):
        """Solves a :class:`ProblemInstance
        <pyknapsack.problem.ProblemInstance>`.

        Returns
        -------
        fractional : :class:`FractionalResult <pyknapsack.results.FractionalResult>`
        zero_one : :class:`ZeroOneResult <pyknapsack.results.ZeroOneResult>`
        """
        return self.solve(instance.items, instance.capacity)

    def solve(self, items, capacity):
        """Solves the fractional and 0/1 knapsack problems
        defined by the given items and capacity.

        The 0/1 problem is solved first, since it places the
        stricter requirements on its input (integral
        weights and capacity, table limits). If either
        solver rejects the instance, the error propagates
        and no result is returned.

        Parameters
        ----------
        items : iterable
            Objects with `index`, `value`, and `weight`
            attributes (e.g., :class:`pyknapsack.problem.Item`).
        capacity : int
            The nonnegative capacity of the knapsack.

        Returns
        -------
        fractional : :class:`FractionalResult <pyknapsack.results.FractionalResult>`
        zero_one : :class:`ZeroOneResult <pyknapsack.results.ZeroOneResult>`

        Raises
        ------
        InvalidItem
        InvalidCapacity
        ResourceExceeded
        """
        instance = ProblemInstance(capacity=capacity, items=items)
        log = self._log
        if log is not None:
            log.debug("Solving knapsack instance with %d items "
                      "and capacity %s", len(instance),
                      instance.capacity)
        start = time.perf_counter()
        zero_one = solve_zero_one(instance.items,
                                  instance.capacity,
                                  table=self._table,
                                  max_table_cells=self._max_table_cells,
                                  max_capacity=self._max_capacity)
        fractional = solve_fractional(instance.items,
                                      instance.capacity)
        stop = time.perf_counter()
        if log is not None:
            log.info("Fractional knapsack: total value = %.2f "
                     "(%s)", fractional.total_value,
                     fractional.selected_description())
            log.info("0/1 knapsack: maximum value = %s, total "
                     "weight = %s (%s)", zero_one.max_value,
                     zero_one.total_weight,
                     zero_one.selected_description())
            log.debug("Solve time: %s", time_format(stop-start,
                                                   digits=2))
        return fractional, zero_one

def solve(items,
          capacity,
          log_filename=None,
          results_filename=None,
          **kwds):
    """Solves the fractional and 0/1 knapsack problems for
    the given items and capacity.

    Parameters
    ----------
    items : iterable
        Objects with `index`, `value`, and `weight`
        attributes (e.g., :class:`pyknapsack.problem.Item`).
    capacity : int
        The nonnegative capacity of the knapsack.
    log_filename : string, optional
        A filename where solver output should be sent in
        addition to console. This keyword will be ignored if
        the `log` keyword is set. (default: None)
    results_filename : string, optional
        Saves the results into a YAML-formatted file with
        the given name. (default: None)
    **kwds
        Additional keywords to be passed to
        :class:`Solver`. See that class for additional
        keyword documentation.

    Returns
    -------
    fractional : :class:`FractionalResult <pyknapsack.results.FractionalResult>`
    zero_one : :class:`ZeroOneResult <pyknapsack.results.ZeroOneResult>`
    """
    if ("log" not in kwds) and \
       (log_filename is not None):
        kwds["log"] = get_simple_logger(
            filename=log_filename)
    opt = Solver(**kwds)
    fractional, zero_one = opt.solve(items, capacity)
    if results_filename is not None:
        write_results(results_filename, fractional, zero_one)
    return fractional, zero_one
