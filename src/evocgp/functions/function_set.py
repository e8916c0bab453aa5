"""
CGP Function Set Module

This module implements the FunctionSet class, the registry of node functions
available to a CGP chromosome. A node's function gene is an index (slot) into
this registry.

Classes:
    FunctionSet: Ordered, bounded registry of named node functions

Functions:
    lookup_function(name): Return the built-in node function with the given name
"""

from typing import Callable, Sequence

from loguru import logger

from evocgp.exceptions                import CapacityExceededError, UnknownFunctionError
from evocgp.functions.basic_functions import node_functions

# Maximum number of functions a function set can hold
MAX_FUNCTIONS = 50

NodeFunction = Callable[[Sequence[float], Sequence[float]], float]

def lookup_function(name: str) -> NodeFunction:
    """
    Return the built-in node function registered under 'name'.

    Raises:
        UnknownFunctionError: If there is no built-in function with that name
    """
    try:
        return node_functions[name]
    except KeyError:
        raise UnknownFunctionError(f"function '{name}' is not known") from None

class FunctionSet:
    """
    The set of node functions from which function genes are drawn.

    Functions are stored in insertion order; the position of a function is the
    value a node's function gene takes when it selects that function. Both the
    built-in functions (see 'basic_functions.py') and caller supplied functions
    can be registered, up to MAX_FUNCTIONS in total.

    Public Properties:
        names: Names of the registered functions, in slot order

    Public Methods:
        register(function, name):            Add a function, raising when full
        add_node_function(names):            Add built-in functions by (comma separated) name
        add_custom_function(function, name): Add a caller supplied function
        clear():                             Remove all functions
        name(slot):                          Name of the function in a slot
    """

    def __init__(self, function_names: str | None = None):
        """
        Parameters:
            function_names: Optional comma separated list of built-in function
                            names used to populate the set (e.g. "add,sub,mul")
        """
        self._names    : list[str]          = []
        self._functions: list[NodeFunction] = []

        if function_names:
            self.add_node_function(function_names)

    def register(self, function: NodeFunction, name: str) -> int:
        """
        Add a function to the set.

        Parameters:
            function: The node function, called as function(inputs, weights)
            name:     Display name of the function

        Returns:
            The slot (function gene value) assigned to the function

        Raises:
            CapacityExceededError: If the set already holds MAX_FUNCTIONS functions
        """
        if len(self._functions) >= MAX_FUNCTIONS:
            raise CapacityExceededError(
                f"function set has reached maximum capacity ({MAX_FUNCTIONS}), function '{name}' not added")

        self._names.append(name)
        self._functions.append(function)
        return len(self._functions) - 1

    def add_node_function(self, function_names: str) -> None:
        """
        Add built-in functions to the set.

        Unknown names, and names which do not fit in the set, are
        reported and skipped.

        Parameters:
            function_names: Comma separated function names, e.g. "and,or,not"
        """
        for name in function_names.split(','):
            name = name.strip()
            if not name:
                continue
            try:
                self.register(lookup_function(name), name)
            except UnknownFunctionError:
                logger.warning("Function '{}' is not known and was not added.", name)
            except CapacityExceededError as error:
                logger.warning("{}", error)

        if not self._functions:
            logger.warning("No functions added to function set.")

    def add_custom_function(self, function: NodeFunction, name: str) -> int | None:
        """
        Add a caller supplied function to the set.

        Parameters:
            function: The node function, called as function(inputs, weights)
            name:     Display name of the function

        Returns:
            The slot assigned to the function, or None if the set is full
        """
        try:
            return self.register(function, name)
        except CapacityExceededError as error:
            logger.warning("{}", error)
            return None

    def clear(self) -> None:
        self._names.clear()
        self._functions.clear()

    @property
    def names(self) -> list[str]:
        return list(self._names)

    def name(self, slot: int) -> str:
        return self._names[slot]

    def index(self, name: str) -> int:
        """
        Return the slot of the first function registered under 'name'.

        Raises:
            UnknownFunctionError: If no function in the set has that name
        """
        try:
            return self._names.index(name)
        except ValueError:
            raise UnknownFunctionError(f"function '{name}' is not in the function set") from None

    def __getitem__(self, slot: int) -> NodeFunction:
        return self._functions[slot]

    def __len__(self) -> int:
        return len(self._functions)

    def __str__(self):
        return f"Functions ({len(self._functions)}):" + ''.join(f" {name}" for name in self._names)

    def __repr__(self):
        return f"FunctionSet({','.join(self._names)!r})"
