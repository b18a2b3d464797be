"""
Configuration settings for solver limits and defaults.

Copyright by Gabriel A. Hackebeil (gabe.hackebeil@gmail.com).
"""
import os
import platform

from pyknapsack import __version__
from pyknapsack.common import TableStrategy

class Configuration(object):
    """The main configuration object.

    Attributes
    ----------
    MAX_TABLE_CELLS : int
        The largest number of cells the 0/1 solver will
        allocate for its dynamic-programming table (the
        number of items plus one, times the capacity plus
        one).
        (default: 50000000)
    MAX_CAPACITY : int
        The largest capacity accepted by the 0/1 solver. A
        value of 0 disables this check. (default: 0)
    TABLE_STRATEGY : str, {'full', 'compact'}
        The default strategy for storing the
        dynamic-programming table. (default: "full")
    DESCRIPTION_DIGITS : int
        The number of digits used when rendering item
        fractions in human-readable selection
        descriptions. (default: 2)
    """
    __slots__ = ("MAX_TABLE_CELLS",
                 "MAX_CAPACITY",
                 "TABLE_STRATEGY",
                 "DESCRIPTION_DIGITS")

    def __init__(self):
        self.reset()

    def reset(self, use_environment=True):
        """Reset the configuration to default settings.

        Parameters
        ----------
        use_environment : bool, optional
            Controls whether or not to check for environment
            variables to overwrite the default
            settings. (default: True)
        """
        self.MAX_TABLE_CELLS = 50000000
        self.MAX_CAPACITY = 0
        self.TABLE_STRATEGY = TableStrategy.full.value
        self.DESCRIPTION_DIGITS = 2
        if use_environment:
            # process environment variables
            prefix = "PYKNAPSACK_"
            for symbol in self.__slots__:
                if prefix+symbol in os.environ:
                    default = getattr(self, symbol)
                    value = os.environ[prefix+symbol]
                    if symbol == "TABLE_STRATEGY":
                        if value not in [s.value for s in TableStrategy]:
                            raise ValueError(
                                "invalid table strategy: %s%s=%s"
                                % (prefix, symbol, value))
                    else:
                        value = type(default)(value)
                        if value < 0:
                            raise ValueError(
                                "invalid negative value: %s%s=%s"
                                % (prefix, symbol, value))
                    setattr(self, symbol, value)

    def __str__(self):
        out =  "pyknapsack version: %s\n" % __version__
        out += ("loaded from: %s\n"
                % (os.path.dirname(__file__)))
        out += ("python version: %s %s (%s, %s)\n"
                % (platform.python_implementation(),
                   platform.python_version(),
                   platform.system(),
                   os.name))
        out += "configuration:"
        for key in self.__slots__:
            out += ("\n - %s: %s" % (key,
                                     getattr(self, key)))
        return out

config = Configuration()

if __name__ == "__main__":                        #pragma:nocover
    print(config)
