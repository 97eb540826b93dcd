import logging
from dataclasses import dataclass
from numbers import Integral

import numpy as np


@dataclass(frozen=True)
class Viewport:
    width: int  # pixels
    height: int  # pixels
    upper_left: complex
    lower_right: complex

    def __post_init__(self):
        for name in ("width", "height"):
            value = getattr(self, name)
            if not isinstance(value, Integral) or isinstance(value, bool) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        object.__setattr__(self, "upper_left", complex(self.upper_left))
        object.__setattr__(self, "lower_right", complex(self.lower_right))

        if self.upper_left.real > self.lower_right.real or self.upper_left.imag < self.lower_right.imag:
            logging.warning(
                f"Viewport corners {self.upper_left} / {self.lower_right} are not upper-left / lower-right, "
                "the image will be mirrored."
            )

    @property
    def resolution(self):
        return self.width, self.height


@dataclass(frozen=True)
class RenderRequest:
    viewport: Viewport
    limit: int  # maximum iterations per point
    workers: int | None = None  # None: use every CPU available to the process

    def __post_init__(self):
        if not isinstance(self.limit, Integral) or isinstance(self.limit, bool) or self.limit < 0:
            raise ValueError(f"Iteration limit must be a non-negative integer, got {self.limit!r}")
        if self.workers is not None:
            if not isinstance(self.workers, Integral) or isinstance(self.workers, bool) or self.workers < 1:
                raise ValueError(f"Worker count must be a positive integer, got {self.workers!r}")


@dataclass
class Band:
    index: int
    start: int  # first row, inclusive
    end: int  # last row, exclusive
    pixels: np.ndarray | None = None  # view of buffer[start:end]

    @property
    def rows(self):
        return self.end - self.start

    def __repr__(self):
        return f"Band({self.index}, rows {self.start}:{self.end})"
