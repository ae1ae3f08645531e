import enum


class PassType(enum.Enum):
    """Frequency transformation applied to the lowpass prototype."""

    LOWPASS = "lowpass"
    HIGHPASS = "highpass"
    BANDPASS = "bandpass"
    NOTCH = "notch"

    @property
    def doubles_order(self) -> bool:
        """Whether each analog pole maps to two digital poles."""
        return self in (PassType.BANDPASS, PassType.NOTCH)
