import pytest

import draw as cli
from mandelbrot_canvas import Palette


def _resolve(*args):
    parser = cli.build_parser()
    return cli.resolve_render_config(parser.parse_args(list(args)), parser)


def test_defaults():
    config = _resolve()
    assert (config.width, config.height) == (1000, 1000)
    assert config.palette is Palette.BASIC
    assert (config.xmin, config.xmax, config.ymin, config.ymax) == (-2.0, 1.0, -1.5, 1.5)
    assert config.max_iterations == 100
    assert config.show is True


def test_palette_is_resolved():
    assert _resolve("--palette", "lch").palette is Palette.LCH


@pytest.mark.parametrize("args", [
    ("--palette", "sepia"),
    ("--width", "0"),
    ("--height", "-3"),
    ("--max-iterations", "0"),
    ("--xmin", "nan"),
    ("--ymax", "inf"),
])
def test_invalid_arguments_exit(args, capsys):
    with pytest.raises(SystemExit) as excinfo:
        _resolve(*args)
    assert excinfo.value.code == 2
    assert "error" in capsys.readouterr().err


def test_render_fills_the_surface():
    surface = cli.render(_resolve("--width", "6", "--height", "4", "--max-iterations", "25"))
    pixels = surface.pixels
    assert pixels.shape == (4, 6, 4)
    assert (pixels[..., 3] == 255).all()


def test_main_without_viewer(capsys):
    code = cli.main(["--width", "4", "--height", "3", "--palette", "hsv", "--max-iterations", "20", "--no-show"])
    assert code == 0
    assert "rendered 4x3 image with the hsv palette" in capsys.readouterr().out


def test_verbose_logging(capsys, monkeypatch):
    monkeypatch.setattr(cli, "VERBOSE", False)
    cli.main(["--width", "2", "--height", "2", "--no-show", "-v"])
    out = capsys.readouterr().out
    assert "Rendering 2x2 with palette basic, 100 iterations" in out
    assert "Rendered 16 bytes" in out


def test_main_reports_render_failures(monkeypatch, capsys):
    def failing_draw(*args, **kwargs):
        raise cli.MandelbrotError("surface went away")

    monkeypatch.setattr(cli, "draw", failing_draw)
    assert cli.main(["--width", "2", "--height", "2", "--no-show"]) == 1
    assert "surface went away" in capsys.readouterr().err
