"""
Conversion of problem instances and results to and from
plain dictionaries, JSON, and YAML.

The dictionary layout matches the request and response
bodies exchanged with a network front end:

- request  : {"capacity": <int>,
              "items": [{"index": <int>,
                         "value": <number>,
                         "weight": <number>}, ...]}
- response : {"fractional": {"total_value": <float>,
                             "selected": <str>},
              "zero_one": {"max_value": <number>,
                           "total_weight": <int>,
                           "selected": <str>}}

Copyright by Gabriel A. Hackebeil (gabe.hackebeil@gmail.com).
"""
import json

import yaml

from pyknapsack.common import SchemaError
from pyknapsack.misc import _is_number
from pyknapsack.problem import (Item,
                                ProblemInstance)

def _require(obj, key, path):
    if key not in obj:
        raise SchemaError("%s: missing required key '%s'"
                          % (path, key))
    val = obj[key]
    if not _is_number(val):
        raise SchemaError("%s.%s: expected a number, got %r"
                          % (path, key, val))
    return val

def instance_from_dict(data):
    """Creates a :class:`ProblemInstance
    <pyknapsack.problem.ProblemInstance>` from a request
    dictionary.

    Raises
    ------
    SchemaError
        If the dictionary does not have the expected
        layout.
    InvalidItem, InvalidCapacity
        If the dictionary is well-formed but defines an
        invalid instance.
    """
    if not isinstance(data, dict):
        raise SchemaError("instance: expected an object, got %s"
                          % (type(data).__name__))
    capacity = _require(data, "capacity", "instance")
    if "items" not in data:
        raise SchemaError("instance: missing required key 'items'")
    raw_items = data["items"]
    if not isinstance(raw_items, list):
        raise SchemaError("instance.items: expected an array, got %s"
                          % (type(raw_items).__name__))
    items = []
    for cnt, obj in enumerate(raw_items):
        path = "instance.items[%d]" % (cnt)
        if not isinstance(obj, dict):
            raise SchemaError("%s: expected an object" % (path))
        items.append(Item(index=_require(obj, "index", path),
                          value=_require(obj, "value", path),
                          weight=_require(obj, "weight", path)))
    return ProblemInstance(capacity=capacity, items=items)

def instance_to_dict(instance):
    """Converts a :class:`ProblemInstance
    <pyknapsack.problem.ProblemInstance>` to a request
    dictionary."""
    return {"capacity": instance.capacity,
            "items": [{"index": item.index,
                       "value": item.value,
                       "weight": item.weight}
                      for item in instance.items]}

def results_to_dict(fractional, zero_one):
    """Converts a pair of results to a response
    dictionary. The fractional total value is rounded to
    two decimal places."""
    return {"fractional":
            {"total_value": round(fractional.total_value, 2),
             "selected": fractional.selected_description()},
            "zero_one":
            {"max_value": zero_one.max_value,
             "total_weight": zero_one.total_weight,
             "selected": zero_one.selected_description()}}

def loads_instance(text):
    """Parses a JSON or YAML document into a
    :class:`ProblemInstance
    <pyknapsack.problem.ProblemInstance>`."""
    try:
        # JSON documents are also valid YAML
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SchemaError("failed to parse instance: %s" % (e)) from e
    return instance_from_dict(data)

def load_instance(stream):
    """Reads a JSON or YAML instance document from a
    file-like object or a filename."""
    if isinstance(stream, str):
        with open(stream) as f:
            return loads_instance(f.read())
    return loads_instance(stream.read())

def dumps_results(fractional, zero_one, format="json"):
    """Serializes a pair of results as a JSON or YAML
    response document.

    Parameters
    ----------
    fractional : :class:`FractionalResult <pyknapsack.results.FractionalResult>`
    zero_one : :class:`ZeroOneResult <pyknapsack.results.ZeroOneResult>`
    format : str, {'json', 'yaml'}
        The output format. (default: 'json')
    """
    data = results_to_dict(fractional, zero_one)
    if format == "json":
        return json.dumps(data, indent=2, sort_keys=True)
    elif format == "yaml":
        return yaml.safe_dump(data, default_flow_style=False)
    else:
        raise ValueError("unknown results format: %r" % (format,))
