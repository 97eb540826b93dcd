from mandel.datatypes import Band


def partition(height, worker_count, buffer=None):
    """
    Split rows [0, height) into contiguous bands, one per worker.

    Yields min(height, worker_count) non-empty bands whose sizes differ by at most one
    row, the first `height % n` bands taking the extra row. When `buffer` is given every
    band carries the view buffer[start:end], so no two bands share a pixel.
    """
    if height <= 0:
        raise ValueError(f"Height must be positive, got {height}")
    if worker_count <= 0:
        raise ValueError(f"Worker count must be positive, got {worker_count}")
    if buffer is not None and buffer.shape[0] != height:
        raise ValueError(f"Buffer has {buffer.shape[0]} rows, expected {height}")

    count = min(height, worker_count)
    base, extra = divmod(height, count)

    bands = []
    start = 0
    for index in range(count):
        end = start + base + (1 if index < extra else 0)
        pixels = buffer[start:end] if buffer is not None else None
        bands.append(Band(index, start, end, pixels))
        start = end
    return bands
