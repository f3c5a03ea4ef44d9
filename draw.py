import math
import sys
import time
from argparse import ArgumentParser
from dataclasses import dataclass

from mandelbrot_canvas import (
    PALETTE_NAMES,
    ImageSurface,
    MandelbrotError,
    Palette,
    UnknownPaletteError,
    draw,
    get_palette,
)

VERBOSE = False


def log(message, *args, **kwargs):
    if VERBOSE:
        print(message, *args, **kwargs)


@dataclass(frozen=True)
class RenderConfig:
    width: int
    height: int
    palette: Palette
    xmin: float
    xmax: float
    ymin: float
    ymax: float
    max_iterations: int
    show: bool


def build_parser():
    parser = ArgumentParser(description='Render the Mandelbrot set with one of the built-in palettes.')

    parser.add_argument('--width', type=int,
                        dest='width', help='width of the image in pixels',
                        metavar='WIDTH', default=1000)

    parser.add_argument('--height', type=int,
                        dest='height', help='height of the image in pixels',
                        metavar='HEIGHT', default=1000)

    parser.add_argument('--palette', type=str,
                        dest='palette', help='colouring strategy: %s' % ', '.join(PALETTE_NAMES),
                        metavar='PALETTE', default='basic')

    parser.add_argument('--xmin', type=float,
                        dest='xmin', help='real part of the left edge of the viewport',
                        metavar='XMIN', default=-2.0)

    parser.add_argument('--xmax', type=float,
                        dest='xmax', help='real part of the right edge of the viewport',
                        metavar='XMAX', default=1.0)

    parser.add_argument('--ymin', type=float,
                        dest='ymin', help='imaginary part of the top edge of the viewport',
                        metavar='YMIN', default=-1.5)

    parser.add_argument('--ymax', type=float,
                        dest='ymax', help='imaginary part of the bottom edge of the viewport',
                        metavar='YMAX', default=1.5)

    parser.add_argument('--max-iterations', type=int,
                        dest='max_iterations', help='maximum number of iterations per point',
                        metavar='MAX_ITERATIONS', default=100)

    parser.add_argument('--no-show', dest='show', action='store_false',
                        help='render without opening an image viewer')

    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable verbose logging of parameters and timings.')

    return parser


def resolve_render_config(opt, parser: ArgumentParser) -> RenderConfig:
    if opt.width <= 0 or opt.height <= 0:
        parser.error(f"--width and --height must be positive, got {opt.width}x{opt.height}.")

    if opt.max_iterations <= 0:
        parser.error(f"--max-iterations must be positive, got {opt.max_iterations}.")

    for name in ('xmin', 'xmax', 'ymin', 'ymax'):
        if not math.isfinite(getattr(opt, name)):
            parser.error(f"--{name} must be a finite number.")

    # Inverted or empty viewports are allowed; they render a degenerate image.
    if opt.xmin >= opt.xmax or opt.ymin >= opt.ymax:
        log("Viewport is empty or inverted; the image will be degenerate.")

    try:
        palette = get_palette(opt.palette)
    except UnknownPaletteError as exc:
        parser.error(f"{exc}. Valid choices: {', '.join(PALETTE_NAMES)}.")

    return RenderConfig(
        width=opt.width,
        height=opt.height,
        palette=palette,
        xmin=opt.xmin,
        xmax=opt.xmax,
        ymin=opt.ymin,
        ymax=opt.ymax,
        max_iterations=opt.max_iterations,
        show=bool(opt.show),
    )


def render(config: RenderConfig) -> ImageSurface:
    surface = ImageSurface(config.width, config.height)
    log("Rendering %dx%d with palette %s, %d iterations" % (
        config.width, config.height, config.palette.value, config.max_iterations))
    log("Viewport: x in [%r, %r], y in [%r, %r]" % (config.xmin, config.xmax, config.ymin, config.ymax))

    start = time.perf_counter()
    draw(
        surface,
        config.width,
        config.height,
        config.palette,
        config.xmin,
        config.xmax,
        config.ymin,
        config.ymax,
        config.max_iterations,
    )
    log("Rendered %d bytes in %.3fs" % (config.width * config.height * 4, time.perf_counter() - start))
    return surface


def main(argv=None):
    parser = build_parser()
    opt = parser.parse_args(argv)

    global VERBOSE
    VERBOSE = bool(opt.verbose)

    config = resolve_render_config(opt, parser)

    try:
        surface = render(config)
    except MandelbrotError as exc:
        print(f"Render failed: {exc}", file=sys.stderr)
        return 1

    print("rendered {0}x{1} image with the {2} palette".format(config.width, config.height, config.palette.value))
    if config.show:
        surface.to_image().show()
    return 0


if __name__ == '__main__':
    sys.exit(main())
