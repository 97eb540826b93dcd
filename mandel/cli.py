import argparse


def parse_pair(text, separator, kind=float):
    """
    Parse "<left><separator><right>" into a (left, right) tuple of `kind`,
    e.g. parse_pair("400x600", "x", int) -> (400, 600).
    """
    left, found, right = text.partition(separator)
    if not found:
        raise ValueError(f"Expected '<a>{separator}<b>', got {text!r}")
    return kind(left), kind(right)


def parse_complex(text):
    """Parse "RE,IM" into a complex number."""
    re, im = parse_pair(text, ",", float)
    return complex(re, im)


def dimensions(text):
    try:
        width, height = parse_pair(text, "x", int)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {text!r}") from None
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"dimensions must be positive, got {text!r}")
    return width, height


def corner(text):
    try:
        return parse_complex(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected RE,IM, got {text!r}") from None


def non_negative_int(text):
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {value}")
    return value


def positive_int(text):
    value = non_negative_int(text)
    if value == 0:
        raise argparse.ArgumentTypeError("must be positive, got 0")
    return value


VIEW_ARGUMENTS = ("pixels", "upper_left", "lower_right", "limit")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Render the Mandelbrot set over a region of the complex plane.",
        epilog="Example: %(prog)s -- mandel.png 1000x750 -1.20,0.35 -1,0.20 500",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("file", metavar="FILE", help="Output image, format from extension.")
    parser.add_argument("pixels", metavar="PIXELS", type=dimensions, nargs="?", help="Image size as WIDTHxHEIGHT.")
    parser.add_argument("upper_left", metavar="UPPERLEFT", type=corner, nargs="?", help="Upper-left corner as RE,IM.")
    parser.add_argument(
        "lower_right", metavar="LOWERRIGHT", type=corner, nargs="?", help="Lower-right corner as RE,IM."
    )
    parser.add_argument("limit", metavar="LIMIT", type=non_negative_int, nargs="?", help="Iteration limit.")
    parser.add_argument(
        "--workers", type=positive_int, metavar="N", help="Number of worker threads, all CPUs if unset.", default=None
    )
    parser.add_argument(
        "--colormap",
        type=str,
        metavar="NAME",
        help="grayscale, fire, water or a matplotlib colormap (default: grayscale, or the one in the --load file).",
        default=argparse.SUPPRESS,
    )
    parser.add_argument("--load", type=str, metavar="PATH", help="Read the view from a settings file.")
    parser.add_argument("--save", type=str, metavar="PATH", help="Write the effective settings to a file.")
    parser.add_argument("--log-file", type=str, metavar="PATH", help="Also log to this file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug messages.")

    args = parser.parse_args(argv)
    missing = [name for name in VIEW_ARGUMENTS if getattr(args, name) is None]
    if args.load is None and missing:
        parser.error(f"missing {', '.join(name.upper().replace('_', '') for name in missing)} (or use --load)")
    if args.load is not None and len(missing) < len(VIEW_ARGUMENTS):
        parser.error("view arguments and --load are mutually exclusive")
    return args
