"""
Module containing factories for tagged SQL comparisons to reduce repetitive placeholder writing

Each factory wraps a value with the operator name and the SQL fragment that goes after the column name,
a query builder then appends the fragment and binds the value to the placeholder.
"""
import logging
import typing
from types import MappingProxyType

logger = logging.getLogger('pysqlops')

OPERATORS = MappingProxyType({
    'equal': ' = ?',
    'greater': ' > ?',
    'greaterOrEqual': ' >= ?',
    'less': ' < ?',
    'lessOrEqual': ' <= ?',
    'like': ' LIKE ?',
})


class Comparison(typing.NamedTuple):
    """
    Immutable tag pairing an operator name, its SQL fragment and the operand to bind.
    """
    name: str
    sql: str
    value: typing.Any

    def clause(self, column):
        """
        :param column: column name the fragment is appended to
        :return: SQL text for this comparison, ie. "age >= ?"
        """
        if not isinstance(column, str):
            raise TypeError("Column must be a string")
        return column + self.sql

    def params(self):
        """
        :return: tuple of positional bindings for the placeholder
        """
        return (self.value,)

    def __repr__(self):
        return f"<pysqlops.Comparison: {self.name} {self.sql!r} {self.value!r}>"


def equal(value):
    return Comparison('equal', OPERATORS['equal'], value)


def greater(value):
    return Comparison('greater', OPERATORS['greater'], value)


def greaterOrEqual(value):
    return Comparison('greaterOrEqual', OPERATORS['greaterOrEqual'], value)


def less(value):
    return Comparison('less', OPERATORS['less'], value)


def lessOrEqual(value):
    return Comparison('lessOrEqual', OPERATORS['lessOrEqual'], value)


def like(value):
    return Comparison('like', OPERATORS['like'], value)


FACTORIES = MappingProxyType({
    factory.__name__: factory for factory in (equal, greater, greaterOrEqual, less, lessOrEqual, like)
})


def factory_for(name):
    """
    Look up a factory by the operator name stored on a Comparison
    :param name: operator name, ie. 'greaterOrEqual'
    :return: the factory function registered under that name
    """
    try:
        return FACTORIES[name]
    except KeyError:
        logger.debug("No comparison factory registered for %r", name)
        raise KeyError(f"Unknown comparison operator: {name}") from None


def from_name(name, value):
    """
    Rebuild a Comparison from a serialized operator name and its value
    """
    return factory_for(name)(value)
