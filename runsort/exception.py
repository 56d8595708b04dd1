"""Custom exceptions for runsort."""


class RunsortError(Exception):
    """Base exception for runsort errors."""


class ContractViolation(RunsortError, AssertionError):
    """Raised when a caller breaks a precondition of a list operation."""


class UnsortedInputError(ContractViolation):
    """Raised when an operation requiring sorted input receives an unsorted list."""


class CyclicListError(ContractViolation):
    """Raised when a traversal finds that a chain of nodes loops back on itself."""


class OwnershipError(ContractViolation):
    """Raised when two handles passed to an operation claim the same nodes."""
