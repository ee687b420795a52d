import re

from . import errors

# Sign, then hex with 0x prefix or decimal; single underscores only between digits
_INTEGER_PATTERN = re.compile(
    r"(?P<sign>[+-]?)(?:0x(?P<hex>[0-9a-f]+(?:_[0-9a-f]+)*)|(?P<dec>[0-9]+(?:_[0-9]+)*))"
)


def check_modulus(p: int) -> None:
    """
    Check that p has the shape of a prime modulus: at least 2, odd unless 2.

    Primality itself is assumed, not tested.

    Raises:
        ValueError: If p cannot be a prime modulus
    """
    if isinstance(p, bool) or not isinstance(p, int) or p < 2:
        raise ValueError(f"Modulus must be an integer of at least 2, got {p!r}")
    if p != 2 and p % 2 == 0:
        raise ValueError(f"Modulus must be 2 or an odd prime, got {p}")


def parse_integer(literal: str | int) -> int:
    """
    Parse an integer literal.

    Accepts plain ints, decimal strings with an optional sign, and
    0x-prefixed hex strings. Surrounding whitespace is ignored and single
    underscores may separate digits.

    Args:
        literal: Literal to parse

    Returns:
        Parsed integer

    Raises:
        ParseError: If the literal is empty or malformed
    """
    if isinstance(literal, bool):
        raise errors.ParseError("Boolean is not an integer literal")
    if isinstance(literal, int):
        return literal
    if not isinstance(literal, str):
        raise errors.ParseError(f"Unsupported literal type: {type(literal).__name__}")

    cleaned = literal.strip().lower()
    if not cleaned:
        raise errors.ParseError("Integer literal is empty")

    match = _INTEGER_PATTERN.fullmatch(cleaned)
    if match is None:
        raise errors.ParseError(f"Invalid integer literal: {literal!r}")

    if match["hex"] is not None:
        value = int(match["hex"], 16)
    else:
        value = int(match["dec"], 10)
    return -value if match["sign"] == "-" else value


def parse_modulus(literal: str | int) -> int:
    """
    Parse a field modulus.

    Raises:
        ParseError: If the literal is malformed or cannot be a prime modulus
    """
    p = parse_integer(literal)
    try:
        check_modulus(p)
    except ValueError as exc:
        raise errors.ParseError(str(exc)) from exc
    return p


def parse_field_element(literal: str | int, p: int, reduce: bool = False) -> int:
    """
    Parse a literal as an element of the prime field of order p.

    Args:
        literal: Literal to parse
        p: Field modulus
        reduce: Reduce out-of-range values modulo p instead of rejecting them

    Returns:
        Integer in [0, p)

    Raises:
        ParseError: If the literal is malformed or out of field range
    """
    value = parse_integer(literal)
    if reduce:
        return value % p
    if not 0 <= value < p:
        raise errors.ParseError(f"Value {value} is out of field range [0, {p})")
    return value
