"""Window functions applied to time-domain buffers before a transform."""

from enum import IntEnum
from typing import Optional

import numpy as np
from scipy.signal import windows

from ..core.errors import InvalidArgumentError


class WindowType(IntEnum):
    """Supported window functions."""

    DEFAULT = 0  # rectangular, leaves the buffer untouched
    HAMMING = 1
    HANN = 2
    BLACKMAN = 3


_WINDOW_FUNCTIONS = {
    WindowType.HAMMING: windows.hamming,
    WindowType.HANN: windows.hann,
    WindowType.BLACKMAN: windows.blackman,
}


def name_of(window_id: int) -> str:
    """Lower-case name of a window id, 'unknown' for ids not in WindowType."""
    try:
        return WindowType(window_id).name.lower()
    except ValueError:
        return "unknown"


def from_name(name: str) -> WindowType:
    """Window type for a name such as 'hann'."""
    try:
        return WindowType[name.strip().upper()]
    except KeyError:
        raise InvalidArgumentError(f"Unknown window: {name!r}") from None


def coefficients(window: WindowType, length: int) -> np.ndarray:
    """Symmetric window coefficients of the given length."""
    if length < 0:
        raise InvalidArgumentError(f"Invalid window length: {length}")
    window = WindowType(window)
    if window is WindowType.DEFAULT:
        return np.ones(length)
    return _WINDOW_FUNCTIONS[window](length, sym=True)


def apply_window(
    buffer: np.ndarray,
    window: WindowType,
    length: Optional[int] = None,
) -> np.ndarray:
    """
    Multiply a buffer by window coefficients in place.

    Args:
        buffer: Real-valued float sample buffer, modified in place
        window: Window function to apply
        length: Number of leading samples to window (default: whole buffer)

    Returns:
        The same buffer, for chaining

    Raises:
        InvalidArgumentError: If buffer is not a float array or length
            exceeds it
    """
    if not isinstance(buffer, np.ndarray) or not np.issubdtype(buffer.dtype, np.floating):
        raise InvalidArgumentError("Window buffer must be a float numpy array")

    if length is None:
        length = len(buffer)
    if not 0 <= length <= len(buffer):
        raise InvalidArgumentError(
            f"Invalid window length {length} for buffer of {len(buffer)}"
        )

    if window != WindowType.DEFAULT:
        buffer[:length] *= coefficients(window, length)
    return buffer


def apply_hamming(buffer: np.ndarray, length: Optional[int] = None) -> np.ndarray:
    return apply_window(buffer, WindowType.HAMMING, length)


def apply_hann(buffer: np.ndarray, length: Optional[int] = None) -> np.ndarray:
    return apply_window(buffer, WindowType.HANN, length)


def apply_blackman(buffer: np.ndarray, length: Optional[int] = None) -> np.ndarray:
    return apply_window(buffer, WindowType.BLACKMAN, length)


def apply_default(buffer: np.ndarray, length: Optional[int] = None) -> np.ndarray:
    return apply_window(buffer, WindowType.DEFAULT, length)


def get_hamming(length: int, offset: int = 0) -> np.ndarray:
    """
    Tail of a Hamming window, for windows split across streamed blocks.

    Args:
        length: Size of the full window
        offset: First coefficient to return

    Returns:
        Coefficients offset..length-1 (empty if offset >= length)
    """
    if offset < 0:
        raise InvalidArgumentError(f"Invalid window offset: {offset}")
    return coefficients(WindowType.HAMMING, length)[offset:]
