"""Utility for computing number of SOS sections."""

from typing import Union

from ._pass_type import PassType


def sos_sections_count(
    pole_count: int,
    pass_type: Union[PassType, str] = PassType.LOWPASS,
) -> int:
    """Compute the number of second-order sections for a design.

    Parameters
    ----------
    pole_count : int
        Number of poles of the lowpass prototype.
    pass_type : PassType or str, default "lowpass"
        Frequency transformation.

    Returns
    -------
    n_sections : int
        Number of biquads in the digital cascade.

    Notes
    -----
    For lowpass and highpass filters each analog section maps to one
    biquad:
        n_sections = ceil(pole_count / 2)

    For bandpass and notch filters each two-pole analog section becomes a
    quartic that splits into two biquads, while a single-pole section still
    maps to one biquad, so:
        n_sections = pole_count

    Examples
    --------
    >>> sos_sections_count(4, "lowpass")
    2
    >>> sos_sections_count(5, "lowpass")
    3
    >>> sos_sections_count(5, "bandpass")
    5
    """
    if pole_count < 1:
        raise ValueError(f"Pole count must be positive, got {pole_count}")

    pass_type = PassType(pass_type)

    if pass_type.doubles_order:
        return pole_count

    return (pole_count + 1) // 2
