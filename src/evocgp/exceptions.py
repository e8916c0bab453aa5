class EvoCGPError(Exception):
    """Base for all evocgp exceptions."""

    pass


# Function set
class FunctionSetError(EvoCGPError):
    """Function set failures."""

    pass


class EmptyFunctionSetError(FunctionSetError):
    """Raised when a function gene is needed but the function set is empty."""

    pass


class CapacityExceededError(FunctionSetError):
    """Raised when registering a function in a full function set."""

    pass


class UnknownFunctionError(FunctionSetError):
    """Raised when a function name has no built-in implementation."""

    pass


# Chromosomes and data
class IncompatibleChromosomeError(EvoCGPError, ValueError):
    """Raised when copying between chromosomes of different shapes."""

    pass


class DatasetMismatchError(EvoCGPError, ValueError):
    """Raised when a chromosome's inputs/outputs do not match a dataset."""

    pass
