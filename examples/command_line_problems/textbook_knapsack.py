#
# This example solves the three-item instance found in most
# algorithms textbooks, where the greedy choice is optimal for
# the fractional problem but not for the 0/1 problem.
#
# Recommended usage:
#
# $ python textbook_knapsack.py
#

import pyknapsack

def create_instance():
    # (weight, value) pairs
    return pyknapsack.ProblemInstance.from_pairs(
        50, [(10, 60), (20, 100), (30, 120)])

if __name__ == "__main__":
    import pyknapsack.cli

    pyknapsack.cli.create_command_line_solver(create_instance())
