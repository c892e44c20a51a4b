from enum import Enum


class GeometryKind(str, Enum):
    """Shape a gradient is rendered into; radial gradients wrap around."""
    LINEAR = "linear"
    RADIAL = "radial"

    @property
    def is_closed(self) -> bool:
        return self is GeometryKind.RADIAL
