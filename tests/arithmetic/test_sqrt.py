"""
Tests for sqrt.py - Tonelli-Shanks modular square roots
"""

import random

import pytest
from montgomery_form import errors
from montgomery_form.arithmetic import sqrt

SMALL_PRIMES = [3, 5, 7, 11, 13, 17, 41, 97, 113, 193, 257]

P25519 = 2**255 - 19
SECP256K1_P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
GOLDILOCKS_P = 2**64 - 2**32 + 1
MERSENNE_127 = 2**127 - 1


class TestModSqrt:
    """Tests for mod_sqrt."""

    @pytest.mark.parametrize(
        "value,p,expected",
        [
            (4, 7, 2),
            (2, 7, 4),
            (13, 17, 8),
            (1, 17, 1),
            (10, 13, 7),
        ],
    )
    def test_known_roots(self, value, p, expected):
        """Test deterministic roots against hand-computed values."""
        assert sqrt.mod_sqrt(value, p) == expected

    def test_four_mod_seven(self):
        """Test either root of 4 modulo 7 is acceptable."""
        assert sqrt.mod_sqrt(4, 7) in (2, 5)

    @pytest.mark.parametrize(
        "value,p",
        [
            (0, 7),
            (17, 17),
            (-34, 17),
        ],
    )
    def test_zero(self, value, p):
        """Test multiples of p have root zero."""
        assert sqrt.mod_sqrt(value, p) == 0

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0, 0),
            (1, 1),
            (3, 1),
            (4, 0),
        ],
    )
    def test_modulus_two(self, value, expected):
        """Test every residue is its own root modulo 2."""
        assert sqrt.mod_sqrt(value, 2) == expected

    def test_reduces_input(self):
        """Test values outside [0, p) are reduced first."""
        assert sqrt.mod_sqrt(4 + 7 * 5, 7) == sqrt.mod_sqrt(4, 7)

    @pytest.mark.parametrize("p", SMALL_PRIMES)
    def test_every_value_small_primes(self, p):
        """Test residues get a valid root and non-residues are rejected."""
        residues = {x * x % p for x in range(1, p)}
        for value in range(1, p):
            if value in residues:
                r = sqrt.mod_sqrt(value, p)
                assert 0 <= r < p
                assert r * r % p == value
            else:
                with pytest.raises(errors.NotAResidueError):
                    sqrt.mod_sqrt(value, p)

    @pytest.mark.parametrize(
        "p",
        [P25519, SECP256K1_P, GOLDILOCKS_P, MERSENNE_127],
    )
    def test_large_primes(self, p):
        """Test roots of random squares modulo cryptographic primes."""
        rng = random.Random(p)
        for _ in range(8):
            x = rng.randrange(1, p)
            r = sqrt.mod_sqrt(x * x, p)
            assert r in (x, p - x)

    @pytest.mark.parametrize(
        "value,p",
        [
            (16, 85),
            (69, 85),
            (81, 205),
        ],
    )
    def test_composite_modulus_does_not_converge(self, value, p):
        """Test a composite modulus that passes Euler's criterion stops the main loop."""
        with pytest.raises(errors.LoopExhaustionError, match="did not converge"):
            sqrt.mod_sqrt(value, p)

    def test_not_a_residue(self):
        """Test 3 is rejected modulo 7."""
        with pytest.raises(errors.NotAResidueError, match="not a quadratic residue"):
            sqrt.mod_sqrt(3, 7)

    @pytest.mark.parametrize(
        "value,p",
        [
            (2, P25519),
            (SECP256K1_P - 1, SECP256K1_P),
            (MERSENNE_127 - 1, MERSENNE_127),
        ],
    )
    def test_not_a_residue_large_primes(self, value, p):
        """Test known non-residues modulo large primes."""
        with pytest.raises(errors.NotAResidueError):
            sqrt.mod_sqrt(value, p)

    def test_not_a_residue_is_value_error(self):
        """Test the failure can be caught as a ValueError."""
        with pytest.raises(ValueError):
            sqrt.mod_sqrt(3, 7)

    @pytest.mark.parametrize(
        "p,error_match",
        [
            (1, "Modulus must be an integer of at least 2"),
            (0, "Modulus must be an integer of at least 2"),
            (-7, "Modulus must be an integer of at least 2"),
            (16, "Modulus must be 2 or an odd prime"),
        ],
    )
    def test_invalid_modulus(self, p, error_match):
        """Test moduli that cannot be prime are rejected."""
        with pytest.raises(ValueError, match=error_match):
            sqrt.mod_sqrt(4, p)


class TestFindNonResidue:
    """Tests for find_non_residue."""

    @pytest.mark.parametrize(
        "p,expected",
        [
            (3, 2),
            (5, 2),
            (7, 3),
            (17, 3),
            (41, 3),
            (P25519, 2),
        ],
    )
    def test_smallest_non_residue(self, p, expected):
        """Test the search returns the smallest non-residue."""
        assert sqrt.find_non_residue(p) == expected

    def test_composite_modulus_exhausts(self):
        """Test a modulus with no n^((p-1)/2) == -1 stops the search."""
        with pytest.raises(errors.LoopExhaustionError, match="No quadratic non-residue"):
            sqrt.find_non_residue(9)


class TestLegendreSymbol:
    """Tests for legendre_symbol and is_quadratic_residue."""

    @pytest.mark.parametrize(
        "value,p,expected",
        [
            (0, 7, 0),
            (14, 7, 0),
            (2, 7, 1),
            (4, 7, 1),
            (3, 7, -1),
            (5, 7, -1),
            (1, 2, 1),
            (2, P25519, -1),
        ],
    )
    def test_symbol(self, value, p, expected):
        """Test the symbol for residues, non-residues and zero."""
        assert sqrt.legendre_symbol(value, p) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0, True),
            (1, True),
            (2, True),
            (3, False),
            (6, False),
        ],
    )
    def test_is_quadratic_residue(self, value, expected):
        """Test residue classification modulo 7."""
        assert sqrt.is_quadratic_residue(value, 7) is expected
