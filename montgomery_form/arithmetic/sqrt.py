from .. import errors
from .. import field


def legendre_symbol(value: int, p: int) -> int:
    """
    Evaluate the Legendre symbol (value / p) with Euler's criterion.

    Args:
        value: Integer to classify
        p: Odd prime modulus

    Returns:
        0 if value is divisible by p, 1 for a quadratic residue, -1 otherwise
    """
    field.check_modulus(p)
    value %= p
    if value == 0:
        return 0
    if p == 2:
        return 1
    return 1 if pow(value, (p - 1) // 2, p) == 1 else -1


def is_quadratic_residue(value: int, p: int) -> bool:
    """Return True if value has a square root modulo p (zero included)."""
    return legendre_symbol(value, p) != -1


def find_non_residue(p: int) -> int:
    """
    Find the smallest n >= 2 that is a quadratic non-residue modulo p.

    Args:
        p: Odd prime modulus

    Returns:
        Smallest quadratic non-residue

    Raises:
        LoopExhaustionError: If no non-residue exists below p
    """
    field.check_modulus(p)
    exponent = (p - 1) // 2
    for n in range(2, p):
        if pow(n, exponent, p) == p - 1:
            return n
    raise errors.LoopExhaustionError(f"No quadratic non-residue modulo {p}")


def mod_sqrt(value: int, p: int) -> int:
    """
    Compute a square root modulo a prime with the Tonelli-Shanks algorithm.

    The result is deterministic: the same inputs always return the same root.

    Args:
        value: Integer whose root is wanted
        p: Odd prime modulus, or 2

    Returns:
        r in [0, p) with r * r == value (mod p)

    Raises:
        ValueError: If p is smaller than 2 or even and not 2
        NotAResidueError: If value is not a quadratic residue modulo p
        LoopExhaustionError: If the main loop fails to converge (composite p)
    """
    field.check_modulus(p)
    value %= p
    if value == 0:
        return 0
    if p == 2:
        return value

    if legendre_symbol(value, p) != 1:
        raise errors.NotAResidueError(f"{value} is not a quadratic residue modulo {p}")

    # p - 1 = q * 2^s with q odd
    q, s = p - 1, 0
    while q % 2 == 0:
        q //= 2
        s += 1

    z = find_non_residue(p)

    m = s
    c = pow(z, q, p)
    t = pow(value, q, p)
    r = pow(value, (q + 1) // 2, p)

    while t != 1:
        # Least i with t^(2^i) == 1
        i, t2i = 0, t
        while t2i != 1:
            t2i = t2i * t2i % p
            i += 1
            if i == m:
                raise errors.LoopExhaustionError(
                    f"Tonelli-Shanks did not converge for {value} modulo {p}"
                )

        b = pow(c, 1 << (m - i - 1), p)
        m = i
        c = b * b % p
        t = t * c % p
        r = r * b % p

    return r
