"""Magnitude spectrum of a single windowed frame."""

from typing import Optional

import numpy as np

from ..core.errors import InvalidArgumentError
from .windows import WindowType, apply_window


def magnitude_spectrum(
    samples: np.ndarray,
    window: WindowType = WindowType.HAMMING,
    fft_size: Optional[int] = None,
) -> np.ndarray:
    """
    Compute the one-sided magnitude spectrum of a frame.

    Args:
        samples: Real-valued time-domain samples (not modified)
        window: Window applied before the transform
        fft_size: Transform size, zero-padding or truncating the frame
            (default: number of samples)

    Returns:
        Magnitudes for bins 0..fft_size // 2
    """
    frame = np.array(samples, dtype=np.float64)
    if frame.ndim != 1 or frame.size == 0:
        raise InvalidArgumentError("Samples must be a non-empty 1-D array")

    if fft_size is None:
        fft_size = len(frame)
    if fft_size <= 0:
        raise InvalidArgumentError(f"Invalid FFT size: {fft_size}")

    apply_window(frame, window)
    return np.abs(np.fft.rfft(frame, n=fft_size))
