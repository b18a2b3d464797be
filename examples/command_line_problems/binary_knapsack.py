#
# This example solves a knapsack instance with twenty
# equal-weight items, so only the item values decide the
# selection.
#
# Recommended usage:
#
# $ python binary_knapsack.py
#

import pyknapsack

def create_instance():
    W = 25
    w = [2,2,2,2,2,2,2,2,2,2,2,2,2,2,2,2,2,2,2,2]
    v = [205,206,207,208,209,210,211,
         212,213,214,215,216,217,218,
         219,220,221,222,223,224]
    return pyknapsack.ProblemInstance.from_pairs(W, zip(w, v))

if __name__ == "__main__":
    import pyknapsack.cli

    pyknapsack.cli.create_command_line_solver(create_instance())
