from __future__ import annotations


class WeightBuddyError(Exception):
    """Base class for every error raised by the weight estimation core."""


# ---- Decoding ----
class DecodeError(WeightBuddyError, ValueError):
    """The byte buffer is not a usable STL file."""


class EmptyStlError(DecodeError):
    def __init__(self) -> None:
        super().__init__("STL input is empty")


class MalformedStlError(DecodeError):
    pass


# ---- Scaling ----
class ScaleError(WeightBuddyError, ValueError):
    """The mesh cannot be rescaled to the requested dimensions."""


class DegenerateAxisError(ScaleError):
    def __init__(self, axis: str) -> None:
        self.axis = axis
        super().__init__(f"Mesh has zero extent along {axis.upper()}; cannot scale it to a target size")


class InvalidTargetError(ScaleError):
    def __init__(self, axis: str, value: float) -> None:
        self.axis = axis
        self.value = value
        super().__init__(f"Target {axis.upper()} dimension must be > 0 mm (got {value})")


# ---- Weight ----
class WeightError(WeightBuddyError, ValueError):
    """The weight cannot be computed from the given parameters."""


class InvalidInfillError(WeightError):
    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(f"Infill percentage must be in the range of 0-100 (got {value})")


class UnknownMaterialError(WeightError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown material: {name!r}")
