"""
Knapsack solver result objects.

Copyright by Gabriel A. Hackebeil (gabe.hackebeil@gmail.com).
"""
import io
import sys
from dataclasses import dataclass

from pyknapsack.configuration import config
from pyknapsack.misc import (as_stream,
                             format_fraction)

def _yaml_value(val):
    if val is None:
        return "null"
    if isinstance(val, tuple):
        return "[%s]" % (", ".join(_yaml_value(v_) for v_ in val))
    return "%r" % (val)

class _ResultWriter(object):
    """Shared output methods for result records. Subclasses
    define the `_fields` class attribute and the
    `_pretty_value` method."""

    _title = None
    _fields = ()

    def selected_description(self, digits=None):
        raise NotImplementedError()                    #pragma:nocover

    def _pretty_value(self, name, val):
        raise NotImplementedError()                    #pragma:nocover

    def pprint(self, stream=sys.stdout):
        """Prints a nicely formatted representation of the
        result.

        Parameters
        ----------
        stream : file-like object or string, optional
            A file-like object or a filename where the
            result should be written to. (default:
            ``sys.stdout``)
        """
        with as_stream(stream) as stream:
            stream.write("%s:\n" % (self._title))
            self.write(stream, prefix=" - ", pretty=True)

    def write(self, stream, prefix="", pretty=False):
        """Writes the result in YAML format to a stream or
        file. Setting `pretty` to True may result in output
        that is not compatible with the YAML format.

        Parameters
        ----------
        stream : file-like object or string
            A file-like object or a filename where the
            result should be written to.
        prefix : string, optional
            A string to use as a prefix for each line that
            is written. (default: '')
        pretty : bool, optional
            Indicates whether or not attributes should be
            formatted for more human-readable output.
            (default: False)
        """
        with as_stream(stream) as stream:
            for name in self._fields:
                val = getattr(self, name)
                if pretty:
                    val = self._pretty_value(name, val)
                else:
                    val = _yaml_value(val)
                stream.write(prefix+'%s: %s\n'
                             % (name, val))

    def __str__(self):
        """Represents the result as a string."""
        tmp = io.StringIO()
        self.pprint(stream=tmp)
        return tmp.getvalue()

@dataclass(frozen=True, eq=True)
class FractionalResult(_ResultWriter):
    """Stores the result of a fractional knapsack solve.

    Attributes
    ----------
    total_value : float
        The total value of the (possibly partial) items
        taken.
    contributions : tuple
        A tuple of (item index, fraction taken) pairs in the
        order the items were taken. Every fraction is in
        (0, 1], and at most one fraction (the last) is less
        than 1.
    """
    total_value: float = 0.0
    contributions: tuple = ()

    _title = "fractional knapsack results"
    _fields = ("total_value", "contributions")

    @property
    def selected_indices(self):
        """The indices of all items that were at least
        partially taken."""
        return tuple(index for index, _ in self.contributions)

    def selected_description(self, digits=None):
        """Returns a human-readable description of the
        items taken (e.g., "Item 1 fully and 0.67 of Item
        3"), or "none" if nothing was taken."""
        if digits is None:
            digits = config.DESCRIPTION_DIGITS
        desc = []
        for index, fraction in self.contributions:
            if fraction >= 1:
                desc.append("Item %d fully" % (index))
            else:
                desc.append("%s of Item %d"
                            % (format_fraction(fraction,
                                               digits=digits),
                               index))
        if len(desc) == 0:
            return "none"
        return " and ".join(desc)

    def to_dict(self):
        """Returns the result as a dictionary of built-in
        types."""
        return {"total_value": self.total_value,
                "contributions": [[index, fraction]
                                  for index, fraction
                                  in self.contributions]}

    def _pretty_value(self, name, val):
        if name == "total_value":
            return "%.2f" % (val)
        assert name == "contributions"
        return self.selected_description()

@dataclass(frozen=True, eq=True)
class ZeroOneResult(_ResultWriter):
    """Stores the result of a 0/1 knapsack solve.

    Attributes
    ----------
    max_value : int or float
        The optimal value. This is an int when all item
        values are integral.
    total_weight : int
        The combined weight of the selected items. This is
        never larger than the capacity.
    selected_indices : tuple
        The indices of the selected items, in input order.
    """
    max_value: int = 0
    total_weight: int = 0
    selected_indices: tuple = ()

    _title = "0/1 knapsack results"
    _fields = ("max_value", "total_weight", "selected_indices")

    def selected_description(self, digits=None):
        """Returns a human-readable description of the
        selected items (e.g., "Item 1 and Item 2"), or
        "none" if nothing was selected. The `digits`
        argument is accepted for symmetry with
        :func:`FractionalResult.selected_description` and
        is ignored."""
        if len(self.selected_indices) == 0:
            return "none"
        return " and ".join("Item %d" % (index)
                            for index in self.selected_indices)

    def to_dict(self):
        """Returns the result as a dictionary of built-in
        types."""
        return {"max_value": self.max_value,
                "total_weight": self.total_weight,
                "selected_indices": list(self.selected_indices)}

    def _pretty_value(self, name, val):
        if name == "selected_indices":
            return self.selected_description()
        return "%r" % (val)

def write_results(stream, fractional, zero_one):
    """Writes a pair of results in YAML format to a stream
    or file, nesting them under the keys 'fractional' and
    'zero_one'.

    Parameters
    ----------
    stream : file-like object or string
        A file-like object or a filename where results
        should be written to.
    fractional : :class:`FractionalResult`
        The fractional knapsack result.
    zero_one : :class:`ZeroOneResult`
        The 0/1 knapsack result.
    """
    with as_stream(stream) as stream:
        stream.write("fractional:\n")
        fractional.write(stream, prefix="  ")
        stream.write("zero_one:\n")
        zero_one.write(stream, prefix="  ")
