"""Low-order Taylor approximations of exp, cos and sin around zero."""


def exp_approx(value: float) -> float:
    """Approximate e**value with the Taylor series up to the cubic term."""
    return 1 + value + value * value / 2.0 + value * value * value / 6.0


def cos_approx(value: float) -> float:
    """Approximate cos(value) with the Taylor series up to the quartic term."""
    return 1 - value * value / 2.0 + value * value * value * value / 24.0


def sin_approx(value: float) -> float:
    """Approximate sin(value) with the Taylor series up to the quintic term."""
    return (
        value
        - value * value * value / 6.0
        + value * value * value * value * value / 120.0
    )