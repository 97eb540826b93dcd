import numpy as np
from matplotlib import colormaps
from matplotlib.colors import LinearSegmentedColormap
from numba import njit

BOUNDED = -1  # escape time of a point that never left the escape radius

# Color stops of the built-in themes
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
ORANGE = (255, 127, 0)
YELLOW = (255, 255, 0)
CYAN = (0, 255, 255)
AQUAMARINE = (127, 255, 212)

THEMES = {
    "grayscale": [BLACK, WHITE],
    "fire": [RED, ORANGE, YELLOW],
    "water": [CYAN, AQUAMARINE, WHITE],
}


@njit(nogil=True)
def shade(escape_time):
    """Gray value of a pixel: black inside the set, lighter the faster a point escapes."""
    if escape_time < 0:
        return 0
    return 255 - min(escape_time, 255)


def colorize(result):
    """Gray value for an escape result (None for points that stayed bounded)."""
    return shade(BOUNDED if result is None else result)


def theme_colormap(name):
    stops = [tuple(channel / 255 for channel in color) for color in THEMES[name]]
    return LinearSegmentedColormap.from_list(name, stops)


def get_colormap(name):
    """Look up a built-in theme first, then any colormap matplotlib knows."""
    if name in THEMES:
        return theme_colormap(name)
    try:
        return colormaps[name]
    except KeyError:
        raise ValueError(f"Unknown colormap: {name}") from None


def apply_colormap(pixels, name):
    """Turn a grayscale buffer into an RGB image of shape (height, width, 3)."""
    colormap = get_colormap(name)
    normalized = pixels.astype(np.float64) / 255
    return (colormap(normalized)[:, :, :3] * 255).astype(np.uint8)
