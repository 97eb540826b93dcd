from numba import njit

from mandel.colors import BOUNDED, shade
from mandel.parameters import pixel_to_complex

ESCAPE_RADIUS = 2.0


@njit(nogil=True)
def escape_time(c, limit):
    """
    Iterate z = z^2 + c from z = 0 and return the iteration at which |z| first exceeds
    the escape radius, or BOUNDED if it stays inside for `limit` iterations.
    """
    z = 0j
    radius_squared = ESCAPE_RADIUS * ESCAPE_RADIUS
    for i in range(limit):
        z = z * z + c
        if z.real * z.real + z.imag * z.imag > radius_squared:
            return i
    return BOUNDED


def escape(c, limit):
    """Escape iteration of `c`, or None when it did not escape within `limit` iterations."""
    count = escape_time(complex(c), int(limit))
    return None if count == BOUNDED else count


@njit(nogil=True)
def render_band(pixels, row_start, width, height, upper_left, lower_right, limit, endpoint):
    """
    Fill `pixels`, a view of rows row_start.. of the full image, with gray values.

    Only this view is written to. Coordinates are computed from the absolute row,
    so the result does not depend on how the image was split.
    """
    for row in range(pixels.shape[0]):
        y = row_start + row
        for x in range(width):
            c = pixel_to_complex(x, y, width, height, upper_left, lower_right, endpoint)
            pixels[row, x] = shade(escape_time(c, limit))
