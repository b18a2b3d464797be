__all__ = ('__title__',
           '__summary__',
           '__version__',
           '__author__',
           '__license__',
           '__copyright__')

__title__: str = 'pyknapsack'
__summary__: str = 'Fractional and 0/1 knapsack solvers for Python'
__version__: str = '0.1.0'
__author__: str = 'The pyknapsack developers'
__license__: str = 'MIT'
__copyright__: str = 'Copyright {0}'.format(__author__)
