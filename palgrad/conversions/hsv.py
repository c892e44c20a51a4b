import numpy as np
from numpy import ndarray as NDArray


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized HSV to unit RGB.

    Args:
        h: Hue in degrees, any real value (wrapped to [0, 360))
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        Array of shape (..., 3)
    """
    h = np.asarray(h, dtype=np.float64) % 360.0
    s = np.asarray(s, dtype=np.float64)
    v = np.asarray(v, dtype=np.float64)

    sector = h / 60.0
    index = np.floor(sector).astype(int) % 6
    fraction = sector - np.floor(sector)

    p = v * (1.0 - s)
    q = v * (1.0 - s * fraction)
    t = v * (1.0 - s * (1.0 - fraction))

    r = np.choose(index, [v, q, p, p, t, v])
    g = np.choose(index, [t, v, v, q, p, p])
    b = np.choose(index, [p, p, t, v, v, q])
    return np.stack([r, g, b], axis=-1)
