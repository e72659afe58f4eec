"""Drawing primitives for RGB frame buffers.

Buffers are numpy arrays of shape (height, width, 3). Shapes use the
engine's float coordinates and are rounded to whole pixels here.
"""

from typing import Tuple
import numpy as np
from numpy.typing import NDArray

from ..core.geometry import Rect

# Type aliases
Color = Tuple[int, int, int]
Buffer = NDArray[np.uint8]


def new_buffer(width: int, height: int) -> Buffer:
    """Allocate a black frame buffer."""
    return np.zeros((height, width, 3), dtype=np.uint8)


def clear(buffer: Buffer, color: Color = (0, 0, 0)) -> None:
    """Clear buffer to a solid color."""
    buffer[:, :] = color


def draw_rect(
    buffer: Buffer,
    rect: Rect,
    color: Color,
    filled: bool = True,
) -> None:
    """Draw a rectangle on the buffer.

    Args:
        buffer: Target numpy array (height, width, 3)
        rect: Rectangle in buffer coordinates
        color: RGB color tuple
        filled: If True, fill rectangle; if False, draw a 1px outline
    """
    h, w = buffer.shape[:2]

    # Clamp to buffer bounds
    x1 = max(0, min(round(rect.x), w))
    y1 = max(0, min(round(rect.y), h))
    x2 = max(0, min(round(rect.right), w))
    y2 = max(0, min(round(rect.bottom), h))
    if x2 <= x1 or y2 <= y1:
        return

    if filled:
        buffer[y1:y2, x1:x2] = color
    else:
        buffer[y1, x1:x2] = color
        buffer[y2 - 1, x1:x2] = color
        buffer[y1:y2, x1] = color
        buffer[y1:y2, x2 - 1] = color


def draw_circle(
    buffer: Buffer,
    cx: float,
    cy: float,
    radius: float,
    color: Color,
) -> None:
    """Draw a filled circle on the buffer."""
    h, w = buffer.shape[:2]

    y_indices, x_indices = np.ogrid[:h, :w]
    # Sample pixel centres
    dist_sq = (x_indices + 0.5 - cx) ** 2 + (y_indices + 0.5 - cy) ** 2
    buffer[dist_sq <= radius ** 2] = color
