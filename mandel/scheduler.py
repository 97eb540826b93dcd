import logging
from threading import Thread
from time import time

import numpy as np

from mandel.bands import partition
from mandel.fractal import render_band
from mandel.parameters import pixel_step
from mandel.settings import resolve_workers


class RenderError(RuntimeError):
    """One or more bands failed; the buffer is incomplete and is not returned."""

    def __init__(self, failures):
        self.failures = failures  # list of (band, exception)
        details = ", ".join(f"{band!r}: {exc!r}" for band, exc in failures)
        super().__init__(f"{len(failures)} band(s) failed: {details}")


class BandWorker(Thread):
    """Renders one band into its own slice of the output buffer."""

    def __init__(self, band, request, endpoint):
        super().__init__(name=f"band-{band.index}")
        self.band = band
        self.request = request
        self.endpoint = endpoint
        self.error = None

    def run(self):
        viewport = self.request.viewport
        try:
            render_band(
                self.band.pixels,
                self.band.start,
                viewport.width,
                viewport.height,
                viewport.upper_left,
                viewport.lower_right,
                self.request.limit,
                self.endpoint,
            )
        except Exception as e:
            # Reported by render() once every worker has been joined
            self.error = e


def render(request, endpoint=True):
    """
    Render the Mandelbrot set for `request` into a (height, width) uint8 buffer.

    The buffer is split into one band of rows per worker and every band is filled by
    its own thread. All threads are joined before returning; if any of them failed a
    RenderError listing the failed bands is raised instead.
    """
    viewport = request.viewport
    workers = resolve_workers(request.workers)
    step_re, step_im = pixel_step(viewport, endpoint)
    logging.info(
        f"Rendering {viewport.width}x{viewport.height} from {viewport.upper_left} to {viewport.lower_right} "
        f"(step {step_re:.3g}, {step_im:.3g}), limit {request.limit}, {workers} worker(s)..."
    )
    start_time = time()

    pixels = np.empty((viewport.height, viewport.width), dtype=np.uint8)
    threads = [BandWorker(band, request, endpoint) for band in partition(viewport.height, workers, pixels)]

    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    failures = [(thread.band, thread.error) for thread in threads if thread.error is not None]
    if failures:
        for band, error in failures:
            logging.error(f"{band!r} failed: {error!r}")
        raise RenderError(failures) from failures[0][1]

    logging.info(f"Rendered {len(threads)} band(s) in {time() - start_time:.2f} seconds.")
    return pixels
