import numpy as np
from numpy import ndarray as NDArray


def atop(source: NDArray, destination: NDArray) -> NDArray:
    """
    Porter-Duff "atop": ``source`` shows only where ``destination`` is covered.

    Both inputs are straight-alpha RGBA float arrays of shape (..., 4) in
    linear light and broadcast against each other. The result keeps the
    destination's alpha::

        Cr * ar = Cs * as * ad + Cd * ad * (1 - as)
        ar      = ad

    Color channels are zero wherever the result alpha is zero.
    """
    source = np.asarray(source, dtype=np.float64)
    destination = np.asarray(destination, dtype=np.float64)

    src_alpha = source[..., 3:4]
    dst_alpha = destination[..., 3:4]

    premultiplied = (
        source[..., :3] * src_alpha * dst_alpha
        + destination[..., :3] * dst_alpha * (1.0 - src_alpha)
    )
    result_alpha = np.broadcast_to(dst_alpha, premultiplied.shape[:-1] + (1,))
    color = np.divide(
        premultiplied,
        result_alpha,
        out=np.zeros_like(premultiplied),
        where=result_alpha > 0.0,
    )
    return np.concatenate([color, result_alpha], axis=-1)
