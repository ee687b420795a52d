import dataclasses

from . import field


@dataclasses.dataclass(frozen=True)
class Point:
    """Affine point on a curve over a prime field. Never validated on its own."""

    x: int
    y: int

    def __iter__(self):
        return iter((self.x, self.y))


@dataclasses.dataclass(frozen=True)
class WeierstrassCurve:
    """Short Weierstrass curve y^2 = x^3 + ax + b over F_p."""

    a: int
    b: int
    p: int

    def __post_init__(self) -> None:
        field.check_modulus(self.p)
        object.__setattr__(self, "a", self.a % self.p)
        object.__setattr__(self, "b", self.b % self.p)

    @classmethod
    def from_literals(cls, a: str | int, b: str | int, p: str | int) -> "WeierstrassCurve":
        """Create from decimal or hex literals, raising ParseError on bad input."""
        modulus = field.parse_modulus(p)
        return cls(
            a=field.parse_field_element(a, modulus, reduce=True),
            b=field.parse_field_element(b, modulus, reduce=True),
            p=modulus,
        )

    def cubic(self, z: int) -> int:
        """Evaluate z^3 + az + b modulo p."""
        return (pow(z, 3, self.p) + self.a * z + self.b) % self.p

    def discriminant(self) -> int:
        """Return 4a^3 + 27b^2 modulo p. Zero means the curve is singular."""
        return (4 * pow(self.a, 3, self.p) + 27 * self.b * self.b) % self.p

    def contains(self, point: Point) -> bool:
        """Check y^2 == x^3 + ax + b (mod p)."""
        return (point.y * point.y - self.cubic(point.x)) % self.p == 0


@dataclasses.dataclass(frozen=True)
class MontgomeryCurve:
    """Montgomery curve By^2 = x^3 + Ax^2 + x over F_p."""

    A: int
    B: int
    p: int

    def __post_init__(self) -> None:
        field.check_modulus(self.p)
        object.__setattr__(self, "A", self.A % self.p)
        object.__setattr__(self, "B", self.B % self.p)

    def contains(self, point: Point) -> bool:
        """Check Bv^2 == u^3 + Au^2 + u (mod p)."""
        u, v = point.x, point.y
        lhs = self.B * v * v
        rhs = pow(u, 3, self.p) + self.A * u * u + u
        return (lhs - rhs) % self.p == 0
