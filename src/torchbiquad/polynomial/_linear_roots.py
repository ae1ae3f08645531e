from ._root_set import RootSet


def linear_roots(b: float) -> RootSet:
    """Root of the monic linear polynomial x + b."""
    return RootSet(real=(-b,), imag=(0.0,))
