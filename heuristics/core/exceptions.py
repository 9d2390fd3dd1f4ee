"""
Custom exceptions for the heuristics library.
Separates configuration errors from contract violations by caller-supplied strategies.
"""


class HeuristicsException(Exception):
    """Base exception for the heuristics library."""

    def __init__(self, message: str = "", details: dict = None):
        """
        Initialize heuristics exception.

        Args:
            message: Error message
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidConfigurationError(HeuristicsException):
    """Raised when configuration parameters are invalid."""

    def __init__(self, parameter: str = None, value: any = None,
                 expected: str = None):
        """
        Initialize invalid configuration error.

        Args:
            parameter: Parameter name
            value: Invalid value
            expected: Expected value or range
        """
        message = "Invalid configuration parameter"
        details = {}

        if parameter:
            details['parameter'] = parameter
        if value is not None:
            details['value'] = value
        if expected:
            details['expected'] = expected

        if parameter:
            message += f": {parameter} = {value}"
            if expected:
                message += f" (expected: {expected})"

        super().__init__(message, details)


class MissingComponentError(InvalidConfigurationError):
    """Raised by a builder when a mandatory component was never supplied."""

    def __init__(self, component: str = None, algorithm: str = None):
        """
        Initialize missing component error.

        Args:
            component: Name of the missing component (e.g. 'selector')
            algorithm: Name of the algorithm being built
        """
        message = "Missing mandatory component"
        details = {}

        if component:
            details['component'] = component
            message += f": no {component} specified"
        if algorithm:
            details['algorithm'] = algorithm
            if component:
                message += f" for {algorithm}"

        # Skip InvalidConfigurationError's parameter/value formatting
        HeuristicsException.__init__(self, message, details)
        self.component = component
        self.algorithm = algorithm


class ContractViolationError(HeuristicsException):
    """Raised when a caller-supplied operator or selector breaks its contract."""
    pass


class EmptyNeighborhoodError(ContractViolationError):
    """Raised when a best-neighbor search meets an empty neighborhood."""

    def __init__(self, operator: str = None):
        """
        Initialize empty neighborhood error.

        Args:
            operator: Name of the operator that produced no neighbors
        """
        message = "Neighborhood is empty"
        details = {}

        if operator:
            details['operator'] = operator
            message += f": operator {operator} produced no candidate solutions"

        super().__init__(message, details)


class OperatorSelectionError(ContractViolationError):
    """Raised when a selector cannot produce a valid operator."""

    def __init__(self, selector: str = None, reason: str = None, index: int = None,
                 pool_size: int = None):
        """
        Initialize operator selection error.

        Args:
            selector: Selector class name
            reason: Reason for failure
            index: Offending operator index, if any
            pool_size: Number of operators in the pool
        """
        message = "Operator selection failed"
        details = {}

        if selector:
            details['selector'] = selector
        if index is not None:
            details['index'] = index
        if pool_size is not None:
            details['pool_size'] = pool_size
        if reason:
            details['reason'] = reason
            message += f": {reason}"

        super().__init__(message, details)
