class CurveArithmeticError(ValueError):
    """Base class for every failure raised by this package."""


class NoInverseExistsError(CurveArithmeticError):
    """Raised when a value shares a factor with the modulus."""


class NotAResidueError(CurveArithmeticError):
    """Raised when a value has no square root modulo p."""


class LoopExhaustionError(CurveArithmeticError):
    """Raised when a bounded search inside Tonelli-Shanks runs out.

    Unreachable for an odd prime modulus once Euler's criterion has passed;
    seeing it means the modulus is not prime.
    """


class ParseError(CurveArithmeticError):
    """Raised when a literal cannot be turned into a field element."""


class TransformFailedError(CurveArithmeticError):
    """Raised when a Weierstrass curve cannot be put in Montgomery form."""

    def __init__(self, message: str, reason: CurveArithmeticError | None = None) -> None:
        super().__init__(message)
        self.reason = reason


class NoRootFoundError(TransformFailedError):
    """Raised when the candidate source runs out before hitting a root of the cubic."""
