"""
Command-line front end for the knapsack solvers.

When no input file is given, the problem is read
interactively: the capacity, the number of items, and then
one "weight value" pair per line.

Copyright by Gabriel A. Hackebeil (gabe.hackebeil@gmail.com).
"""
import sys
import logging
import argparse

import pyknapsack
from pyknapsack.common import (TableStrategy,
                               KnapsackError,
                               SchemaError)
from pyknapsack.misc import get_simple_logger
from pyknapsack.problem import ProblemInstance
from pyknapsack.serialization import (load_instance,
                                      dumps_results)
from pyknapsack.results import write_results

def _parse_number(token, what):
    try:
        return int(token)
    except ValueError:
        pass
    try:
        return float(token)
    except ValueError:
        raise SchemaError("invalid %s: %r" % (what, token)) from None

def _next_line(stdin, what):
    line = stdin.readline()
    if line == "":
        raise SchemaError("unexpected end of input while "
                          "reading %s" % (what))
    return line.strip()

def read_interactive(stdin, stdout):
    """Prompts for and reads a problem instance from a
    text stream.

    Parameters
    ----------
    stdin : file-like object
        The stream to read from.
    stdout : file-like object
        The stream where prompts are written.

    Returns
    -------
    :class:`ProblemInstance <pyknapsack.problem.ProblemInstance>`
    """
    stdout.write("Knapsack capacity (W): ")
    stdout.flush()
    capacity = _parse_number(_next_line(stdin, "the capacity"),
                             "capacity")
    stdout.write("Number of items (n): ")
    stdout.flush()
    n = _parse_number(_next_line(stdin, "the number of items"),
                      "number of items")
    if (not isinstance(n, int)) or (n < 0):
        raise SchemaError("invalid number of items: %r" % (n,))
    stdout.write("Please enter weight and value for each item "
                  "on a separate line (weight first, then "
                  "value):\n")
    stdout.flush()
    pairs = []
    for i in range(1, n+1):
        what = "item %d" % (i)
        parts = _next_line(stdin, what).split()
        if len(parts) != 2:
            raise SchemaError("%s: expected 'weight value', got %r"
                              % (what, " ".join(parts)))
        weight = _parse_number(parts[0], what+" weight")
        value = _parse_number(parts[1], what+" value")
        pairs.append((weight, value))
    return ProblemInstance.from_pairs(capacity, pairs)

def write_received_input(instance, stdout):
    """Echoes a problem instance in human-readable form."""
    stdout.write("\nReceived input:\n")
    stdout.write("Capacity = %s, Number of items = %d\n"
                 % (instance.capacity, len(instance)))
    for item in instance.items:
        stdout.write("Item %d: weight = %s, value = %s\n"
                     % (item.index, item.weight, item.value))
    stdout.write("\n")

def write_text_results(fractional, zero_one, stdout):
    """Writes a pair of results in the line-oriented text
    format."""
    stdout.write("Fractional Knapsack (Greedy): Total value = %.2f\n"
                 % (fractional.total_value))
    stdout.write("Selected: %s\n\n"
                 % (fractional.selected_description()))
    stdout.write("0/1 Knapsack (Dynamic Programming): "
                 "Maximum value = %s\n" % (zero_one.max_value))
    stdout.write("Total weight used = %s\n"
                 % (zero_one.total_weight))
    stdout.write("Selected items: %s\n"
                 % (zero_one.selected_description()))

def create_parser():
    """Creates the argument parser used by :func:`main`."""
    parser = argparse.ArgumentParser(
        prog="pyknapsack",
        description=("Solve the fractional and 0/1 knapsack "
                     "problems for a single instance"),
        formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    parser.add_argument(
        "--input", type=str, default=None,
        help=("A JSON or YAML file defining the instance. "
              "When unset, the instance is read "
              "interactively from stdin."))
    parser.add_argument(
        "--format", type=str, default="text",
        choices=["text", "json", "yaml"],
        help="The format used to print results.")
    parser.add_argument(
        "--table-strategy", type=str, default=None,
        choices=[s.value for s in TableStrategy],
        help=("The storage strategy for the 0/1 "
              "dynamic-programming table. When unset, "
              "the configured default is used."))
    parser.add_argument(
        "--max-table-cells", type=int, default=None,
        help=("The largest dynamic-programming table "
              "allowed. When unset, the configured "
              "default is used."))
    parser.add_argument(
        "--max-capacity", type=int, default=None,
        help=("The largest capacity accepted by the 0/1 "
              "solver (0 means no limit). When unset, the "
              "configured default is used."))
    parser.add_argument(
        "--log-filename", type=str, default=None,
        help="A filename to store solver output into.")
    parser.add_argument(
        "--results-filename", type=str, default=None,
        help=("When set, saves the results into a "
              "YAML-formatted file with the given name."))
    parser.add_argument('--version',
                        action='version',
                        version='pyknapsack '+str(pyknapsack.__version__))
    return parser

def main(args=None,
         stdin=None,
         stdout=None,
         stderr=None,
         instance=None):
    """Runs the command-line solver and returns an exit
    status.

    Parameters
    ----------
    args : list of str, optional
        The command-line arguments. If None,
        ``sys.argv[1:]`` is used. (default: None)
    stdin, stdout, stderr : file-like objects, optional
        The streams used for interactive input, results,
        and error messages. (default: the ``sys`` streams)
    instance : :class:`ProblemInstance <pyknapsack.problem.ProblemInstance>`, optional
        When set, this instance is solved and the --input
        option is ignored. (default: None)
    """
    if stdin is None:
        stdin = sys.stdin
    if stdout is None:
        stdout = sys.stdout
    if stderr is None:
        stderr = sys.stderr
    args = create_parser().parse_args(args)
    solver_kwds = {"table": args.table_strategy,
                   "max_table_cells": args.max_table_cells,
                   "max_capacity": args.max_capacity}
    if args.log_filename is not None:
        solver_kwds["log"] = get_simple_logger(
            filename=args.log_filename,
            console=False,
            level=logging.DEBUG)
    try:
        if instance is not None:
            if args.input is not None:
                logging.getLogger("pyknapsack").warning(
                    "The user-specified --input setting will "
                    "be ignored.")
        elif args.input is None:
            instance = read_interactive(stdin, stdout)
            write_received_input(instance, stdout)
        else:
            instance = load_instance(args.input)
        solver = pyknapsack.Solver(**solver_kwds)
        fractional, zero_one = solver.solve_instance(instance)
    except (KnapsackError, OSError) as e:
        stderr.write("error: %s\n" % (e))
        return 1
    if args.format == "text":
        write_text_results(fractional, zero_one, stdout)
    else:
        stdout.write(dumps_results(fractional,
                                   zero_one,
                                   format=args.format))
        stdout.write("\n")
    if args.results_filename is not None:
        write_results(args.results_filename, fractional, zero_one)
    return 0

def create_command_line_solver(instance, args=None):
    """Solve a fixed problem instance from a script,
    exposing the solver options as command-line
    arguments. Exits the process with the status returned
    by :func:`main`."""
    sys.exit(main(args, instance=instance))

if __name__ == "__main__":                        #pragma:nocover
    sys.exit(main())
