from . import errors
from . import field
from . import transform

# ============================================================================
# CURVE CONFIGURATION
# ============================================================================

# Prime modulus of the base field
MODULUS = "17"

# Weierstrass coefficients: y^2 = x^3 + ax + b
COEFFICIENT_A = "8"
COEFFICIENT_B = "2"

# Point on the curve
POINT_X = "14"
POINT_Y = "6"

# ============================================================================


def main() -> int:
    try:
        p = field.parse_modulus(MODULUS)
        a = field.parse_field_element(COEFFICIENT_A, p)
        b = field.parse_field_element(COEFFICIENT_B, p)
        x = field.parse_field_element(POINT_X, p)
        y = field.parse_field_element(POINT_Y, p)
        result = transform.transform_to_montgomery(x, y, a, b, p)
    except errors.CurveArithmeticError as exc:
        print(f"No valid transformation found: {exc}")
        return 1

    print(f"x_montgomery: {result.u}")
    print(f"y_montgomery: {result.v}")
    print(f"a_montgomery: {result.A}")
    print(f"b_montgomery: {result.B}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
