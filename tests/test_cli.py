import os
import re

import numpy as np
from click.testing import CliRunner
from PIL import Image

from palgrad import __version__
from palgrad import cli
from palgrad.cli import main


def invoke(*args):
    return CliRunner().invoke(main, list(args))


def printed_colors(result):
    return result.output.strip().split(", ")


def test_linear_stepped_print():
    result = invoke("--no-file", "-p", "-l", "-n", "1", "-c", "255,0,0;0,0,255")

    assert result.exit_code == 0, result.output
    colors = printed_colors(result)
    assert len(colors) == 3
    assert colors[0] == "ff0000"
    assert colors[-1] == "0000ff"


def test_radial_stepped_print_omits_closing_stop():
    result = invoke("--no-file", "-p", "-n", "1", "-c", "255,0,0;0,0,255")

    assert result.exit_code == 0, result.output
    assert printed_colors(result) == ["ff0000", "0000ff"]


def test_radial_stepped_print_contains_control_colors():
    result = invoke("--no-file", "-p", "-n", "2", "-c", "255,0,0;0,0,255")

    assert result.exit_code == 0, result.output
    colors = printed_colors(result)
    assert len(colors) == 4
    assert colors[0] == "ff0000"
    assert colors[2] == "0000ff"


def test_colors_from_several_encodings():
    result = invoke("--no-file", "-p", "-l", "-n", "1", "-c", "255,0,0;0,0,255", "--lch", "50,20,10;60,20,90")

    assert result.exit_code == 0, result.output
    assert len(printed_colors(result)) == 4


def test_print_without_steps_prints_nothing():
    result = invoke("--no-file", "-p")
    assert result.exit_code == 0
    assert result.output == ""


def test_no_file_skips_continuous_render(monkeypatch):
    def fail(config):
        raise AssertionError(f"unexpected render of {config.kind}")

    monkeypatch.setattr(cli, "render", fail)
    result = invoke("--no-file", "-p", "-s", "64")
    assert result.exit_code == 0, result.output
    assert result.output == ""


def test_radial_file(tmp_path):
    target = tmp_path / "disc.png"
    result = invoke("-s", "16", "-n", "2", str(target))

    assert result.exit_code == 0, result.output
    with Image.open(target) as image:
        assert image.mode == "RGBA"
        assert image.size == (16, 16)


def test_linear_file(tmp_path):
    target = tmp_path / "strip.png"
    result = invoke("-l", "--ss", "10x5", "-n", "2", str(target))

    assert result.exit_code == 0, result.output
    with Image.open(target) as image:
        assert image.mode == "RGB"
        # default colors: three points, two steps each -> five swatches
        assert image.size == (50, 5)


def test_default_filename():
    runner = CliRunner()
    with runner.isolated_filesystem():
        result = runner.invoke(main, ["-s", "8"])

        assert result.exit_code == 0, result.output
        names = os.listdir(".")
        assert len(names) == 1
        assert re.fullmatch(r"\d+\.png", names[0])


def test_overlay_center(tmp_path):
    target = tmp_path / "overlay.png"
    result = invoke("-o", "0,0,0", "--overlay-factor", "1.0", "-s", "16", str(target))

    assert result.exit_code == 0, result.output
    with Image.open(target) as image:
        pixels = np.asarray(image)
    assert tuple(pixels[7, 7]) == (0, 0, 0, 255)
    assert tuple(pixels[0, 0]) == (0, 0, 0, 0)


def test_bad_color_literal():
    result = invoke("--no-file", "-c", "300,0,0;0,0,0")
    assert result.exit_code == 2
    assert "out of range" in result.output


def test_single_color_rejected():
    result = invoke("--no-file", "-c", "255,0,0")
    assert result.exit_code == 2


def test_linear_conflicts():
    assert invoke("--no-file", "-l", "-s", "10").exit_code == 2
    assert invoke("--no-file", "-l", "-o", "1,2,3").exit_code == 2


def test_bad_swatch_size():
    assert invoke("--no-file", "-l", "--ss", "0x4").exit_code == 2
    assert invoke("--no-file", "-l", "--ss", "4x4x4").exit_code == 2


def test_unwritable_output(tmp_path):
    result = invoke("-s", "8", str(tmp_path / "missing" / "out.png"))
    assert result.exit_code != 0
    assert not (tmp_path / "missing").exists()


def test_version():
    result = invoke("--version")
    assert result.exit_code == 0
    assert __version__ in result.output
