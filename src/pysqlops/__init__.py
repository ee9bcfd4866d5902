"""
pysqlops - Tagged SQL comparison operators for parameterized query builders.

This package provides the following:
- Comparison: Immutable tag holding an operator name, its SQL fragment and the value to bind.
- equal, greater, greaterOrEqual, less, lessOrEqual, like: Factories producing Comparison tags.
- factory_for, from_name: Lookups for rebuilding a tag from its operator name.

Usage:
    from pysqlops import equal, like
"""

from .comparisons import (
    OPERATORS,
    FACTORIES,
    Comparison,
    equal,
    greater,
    greaterOrEqual,
    less,
    lessOrEqual,
    like,
    factory_for,
    from_name,
)
