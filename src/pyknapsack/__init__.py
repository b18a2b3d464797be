
# configure a very basic logger for the module
def _configLogging():
    import logging
    logger = logging.getLogger('pyknapsack')
    logger.setLevel(logging.WARNING)
    formatter = logging.Formatter(
        '%(levelname)s(%(name)s): %(message)s')
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)
_configLogging()
del _configLogging

from pyknapsack.__about__ import __version__
from pyknapsack.configuration import config
from pyknapsack.common import (TableStrategy,
                               KnapsackError,
                               InvalidItem,
                               InvalidCapacity,
                               ResourceExceeded,
                               SchemaError)
from pyknapsack.problem import (Item,
                                ProblemInstance)
from pyknapsack.results import (FractionalResult,
                                ZeroOneResult)
from pyknapsack.fractional import solve_fractional
from pyknapsack.zero_one import solve_zero_one
from pyknapsack.solver import (Solver,
                               solve)
