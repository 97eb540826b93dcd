import sys
import logging

from mandel.cli import parse_args
from mandel.colors import get_colormap
from mandel.datatypes import RenderRequest, Viewport
from mandel.export import save_image
from mandel.scheduler import RenderError, render
from mandel.settings import load_settings, save_settings

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logging(log_file=None, verbose=False):
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO, format=LOG_FORMAT, handlers=handlers, force=True
    )


def build_request(args):
    """Combine command line arguments and an optional settings file into a request."""
    if args.load:
        request, colormap = load_settings(args.load)
        if args.workers is not None:
            request = RenderRequest(request.viewport, request.limit, args.workers)
    else:
        width, height = args.pixels
        viewport = Viewport(width, height, args.upper_left, args.lower_right)
        request = RenderRequest(viewport, args.limit, args.workers)
        colormap = "grayscale"
    colormap = getattr(args, "colormap", colormap)
    get_colormap(colormap)  # unknown names fail before rendering
    return request, colormap


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_file, args.verbose)

    try:
        request, colormap = build_request(args)
        pixels = render(request)
        save_image(args.file, pixels, colormap)
        if args.save:
            save_settings(args.save, request, colormap)
    except ValueError as e:
        logging.error(f"Invalid input: {e}")
        return 1
    except RenderError as e:
        logging.error(f"Rendering failed: {e}")
        return 1
    except OSError as e:
        logging.error(f"I/O error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
