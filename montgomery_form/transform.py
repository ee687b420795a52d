"""
Weierstrass to Montgomery conversion.

For a root z0 of x^3 + ax + b and s = 1 / sqrt(3 * z0^2 + a), the change of
variables u = s(x - z0), v = sy sends y^2 = x^3 + ax + b onto
By^2 = x^3 + Ax^2 + x with A = 3 * z0 * s and B = s.
"""

import dataclasses
import logging
import random
import typing as t

from . import curves
from . import errors
from .arithmetic import euclid
from .arithmetic import sqrt

logger = logging.getLogger(__name__)

# Upper bound on random draws before giving up on the root search
DEFAULT_MAX_TRIALS = 10_000


def scan_candidates(p: int) -> t.Iterator[int]:
    """Yield every field element in ascending order."""
    return iter(range(p))


def random_candidates(
    p: int, rng: random.Random | None = None, max_trials: int = DEFAULT_MAX_TRIALS
) -> t.Iterator[int]:
    """
    Yield uniformly random field elements.

    Args:
        p: Field modulus
        rng: Random source, a fresh unseeded random.Random when omitted
        max_trials: Number of draws before the iterator stops

    Returns:
        Iterator over at most max_trials values in [0, p)
    """
    if max_trials <= 0:
        raise ValueError("max_trials must be greater than 0")
    rng = rng if rng is not None else random.Random()
    return (rng.randrange(p) for _ in range(max_trials))


def find_cubic_root(
    a: int, b: int, p: int, candidates: t.Iterable[int] | None = None
) -> int:
    """
    Find z with z^3 + az + b == 0 (mod p).

    Args:
        a: Curve coefficient a
        b: Curve coefficient b
        p: Field modulus
        candidates: Values to try, in order. Defaults to scanning [0, p).

    Returns:
        The first candidate that is a root, reduced into [0, p)

    Raises:
        NoRootFoundError: If the candidates run out first
    """
    curve = curves.WeierstrassCurve(a, b, p)
    source = scan_candidates(p) if candidates is None else candidates
    for candidate in source:
        if curve.cubic(candidate) == 0:
            return candidate % p
    raise errors.NoRootFoundError(f"No root of x^3 + {curve.a}x + {curve.b} found modulo {p}")


@dataclasses.dataclass(frozen=True)
class MontgomeryTransform:
    """Isomorphism from a short Weierstrass curve to Montgomery form."""

    source: curves.WeierstrassCurve
    root: int
    scale: int

    @classmethod
    def from_curve(
        cls,
        curve: curves.WeierstrassCurve,
        candidates: t.Iterable[int] | None = None,
    ) -> "MontgomeryTransform":
        """
        Derive the transform for a curve.

        Args:
            curve: Source Weierstrass curve
            candidates: Root-search candidates, see find_cubic_root

        Returns:
            Transform built on the first root found

        Raises:
            TransformFailedError: If any step fails. The underlying error is
                kept in .reason and chained as __cause__.
        """
        p = curve.p
        root = find_cubic_root(curve.a, curve.b, p, candidates)
        logger.debug("Found root z0=%d modulo %d", root, p)

        s_squared = (3 * root * root + curve.a) % p
        try:
            s = sqrt.mod_sqrt(s_squared, p)
            logger.debug("s^2=%d, s=%d", s_squared, s)
            scale = euclid.mod_inverse(s, p)
        except errors.CurveArithmeticError as exc:
            raise errors.TransformFailedError(
                f"Cannot transform curve: {exc}", reason=exc
            ) from exc
        logger.debug("s^-1=%d", scale)

        return cls(source=curve, root=root, scale=scale)

    @property
    def curve(self) -> curves.MontgomeryCurve:
        """Return the target Montgomery curve."""
        p = self.source.p
        return curves.MontgomeryCurve(
            A=3 * self.root * self.scale % p,
            B=self.scale % p,
            p=p,
        )

    def map_point(self, point: curves.Point) -> curves.Point:
        """Send a Weierstrass point to the Montgomery curve."""
        p = self.source.p
        return curves.Point(
            x=self.scale * (point.x - self.root) % p,
            y=self.scale * point.y % p,
        )

    def unmap_point(self, point: curves.Point) -> curves.Point:
        """Send a Montgomery point back to the Weierstrass curve."""
        p = self.source.p
        s = euclid.mod_inverse(self.scale, p)
        return curves.Point(
            x=(point.x * s + self.root) % p,
            y=point.y * s % p,
        )


@dataclasses.dataclass(frozen=True)
class TransformResult:
    """Montgomery coefficients and the mapped point."""

    A: int
    B: int
    u: int
    v: int
    p: int
    root: int
    scale: int

    @property
    def curve(self) -> curves.MontgomeryCurve:
        return curves.MontgomeryCurve(self.A, self.B, self.p)

    @property
    def point(self) -> curves.Point:
        return curves.Point(self.u, self.v)

    def __iter__(self):
        return iter((self.A, self.B, self.u, self.v))


def transform_to_montgomery(
    x: int,
    y: int,
    a: int,
    b: int,
    p: int,
    candidates: t.Iterable[int] | None = None,
) -> TransformResult:
    """
    Convert a point and curve from short Weierstrass to Montgomery form.

    Args:
        x: Point x-coordinate
        y: Point y-coordinate
        a: Weierstrass coefficient a
        b: Weierstrass coefficient b
        p: Odd prime modulus
        candidates: Root-search candidates. Defaults to a deterministic scan
            of [0, p); pass random_candidates(p, rng) for random sampling.

    Returns:
        TransformResult with A, B, u, v all in [0, p)

    Raises:
        TransformFailedError: If no root is found, 3 * z0^2 + a has no square
            root, or that root is not invertible
    """
    transform = MontgomeryTransform.from_curve(curves.WeierstrassCurve(a, b, p), candidates)
    target = transform.curve
    image = transform.map_point(curves.Point(x, y))
    return TransformResult(
        A=target.A,
        B=target.B,
        u=image.x,
        v=image.y,
        p=p,
        root=transform.root,
        scale=transform.scale,
    )
