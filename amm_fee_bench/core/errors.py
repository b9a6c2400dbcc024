"""Precondition errors raised by pools, generators and benchmarks."""


class AMMFeeBenchError(ValueError):
    """Base class for all precondition violations in this package."""


class InvalidReserveError(AMMFeeBenchError):
    """Reserves are non-positive, or a trade would make them so."""


class InvalidPolicyError(AMMFeeBenchError):
    """Unrecognized fee policy tag."""


class InvalidSequenceError(AMMFeeBenchError):
    """Trade sequence generator called with unusable parameters."""
