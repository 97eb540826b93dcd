from numba import njit


@njit
def pixel_to_complex(x, y, width, height, upper_left, lower_right, endpoint=True):
    """
    Map pixel (x, y) of a width x height image onto the complex plane.

    Columns run from upper_left.real to lower_right.real, rows from upper_left.imag
    down to lower_right.imag. With endpoint=True the last column/row lands exactly
    on lower_right (like np.linspace), otherwise the image covers the half-open
    rectangle and lower_right itself is never sampled. The default divides by
    width - 1 and height - 1 rather than width and height, so the center pixel of
    an odd-sized image is the center of the view.
    """
    x_steps = max(width - 1, 1) if endpoint else width
    y_steps = max(height - 1, 1) if endpoint else height
    re = upper_left.real + x * (lower_right.real - upper_left.real) / x_steps
    im = upper_left.imag + y * (lower_right.imag - upper_left.imag) / y_steps
    return complex(re, im)


def pixel_step(viewport, endpoint=True):
    """Distance between neighbouring pixels along the real and imaginary axis."""
    x_steps = max(viewport.width - 1, 1) if endpoint else viewport.width
    y_steps = max(viewport.height - 1, 1) if endpoint else viewport.height
    return (
        (viewport.lower_right.real - viewport.upper_left.real) / x_steps,
        (viewport.lower_right.imag - viewport.upper_left.imag) / y_steps,
    )
