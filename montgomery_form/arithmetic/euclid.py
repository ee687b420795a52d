import typing as t

from .. import errors


class BezoutResult(t.NamedTuple):
    """gcd together with coefficients satisfying a*x + b*y == gcd."""

    gcd: int
    x: int
    y: int


def extended_gcd(a: int, b: int) -> BezoutResult:
    """
    Run the extended Euclidean algorithm.

    Iterative, so the stack stays flat for moduli of any bit length.

    Args:
        a: First integer
        b: Second integer

    Returns:
        BezoutResult (gcd, x, y) with a*x + b*y == gcd
    """
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1

    while r != 0:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_x, x = x, old_x - quotient * x
        old_y, y = y, old_y - quotient * y

    return BezoutResult(old_r, old_x, old_y)


def mod_inverse(value: int, modulus: int) -> int:
    """
    Compute the multiplicative inverse of value modulo modulus.

    Args:
        value: Value to invert (any integer, reduced first)
        modulus: Positive modulus

    Returns:
        The unique x in [0, modulus) with value * x == 1 (mod modulus)

    Raises:
        ValueError: If modulus is not positive
        NoInverseExistsError: If gcd(value, modulus) != 1
    """
    if modulus <= 0:
        raise ValueError("Modulus must be positive")

    gcd, x, _ = extended_gcd(value % modulus, modulus)
    if gcd != 1:
        raise errors.NoInverseExistsError(
            f"{value} has no inverse modulo {modulus} (gcd is {gcd})"
        )

    return x % modulus
