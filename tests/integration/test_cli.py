"""End-to-end tests for the glyphoutline command line."""

import pytest

from glyphoutline import __version__
from glyphoutline.cli import main


def run(capsys, *args: object) -> tuple[int, str, str]:
    code = main([str(arg) for arg in args])
    captured = capsys.readouterr()
    return code, captured.out, captured.err


class TestSuccess:
    """Successful runs print the banner followed by the path."""

    def test_square(self, capsys, truetype_font):
        code, out, err = run(capsys, truetype_font, "A")

        assert code == 0
        assert err == ""
        assert out.splitlines() == [
            f"// Successfully extracted vector data for character 'A' from {truetype_font}.",
            "// Extracted Glyph Path:",
            "   Contour # 1",
            "      MoveTo (    0,     0)",
            "      LineTo (  100,     0)",
            "      LineTo (  100,   100)",
            "      LineTo (    0,   100)",
            "      LineTo (    0,     0)",
        ]

    def test_ring(self, capsys, truetype_font):
        code, out, _ = run(capsys, truetype_font, "O")

        lines = out.splitlines()
        assert code == 0
        assert lines[2:8] == [
            "   Contour # 1",
            "      MoveTo (   50,     0)",
            "      QuadTo (  100,     0) (  100,    50)",
            "      QuadTo (  100,   100) (   50,   100)",
            "      QuadTo (    0,   100) (    0,    50)",
            "      QuadTo (    0,     0) (   50,     0)",
        ]
        assert lines[8] == "   Contour # 2"
        assert lines[9] == "      MoveTo (   25,    25)"

    def test_implied_point(self, capsys, truetype_font):
        code, out, _ = run(capsys, truetype_font, "S")

        assert code == 0
        assert out.splitlines()[3:] == [
            "      MoveTo (    0,     0)",
            "      QuadTo (    0,   100) (   50,   100)",
            "      QuadTo (  101,   100) (  101,     0)",
            "      LineTo (    0,     0)",
        ]

    def test_composite(self, capsys, truetype_font):
        code, out, _ = run(capsys, truetype_font, "D")

        assert code == 0
        assert "      MoveTo (  200,     0)" in out.splitlines()

    def test_empty_glyph(self, capsys, truetype_font):
        code, out, _ = run(capsys, truetype_font, " ")

        assert code == 0
        assert out.splitlines() == [
            f"// Successfully extracted vector data for character ' ' from {truetype_font}.",
            "// Extracted Glyph Path:",
        ]

    def test_cubic_glyph(self, capsys, cff_font):
        code, out, _ = run(capsys, cff_font, "C")

        assert code == 0
        assert [line.split()[0] for line in out.splitlines()[3:]] == ["MoveTo", "LineTo", "LineTo"]

    def test_version(self, capsys):
        code, out, _ = run(capsys, "--version")

        assert code == 0
        assert out.strip() == f"glyphoutline v{__version__}"

    def test_log_file(self, capsys, tmp_path, truetype_font):
        log_file = tmp_path / "extract.log"

        code, _, _ = run(capsys, truetype_font, "A", "--log-file", log_file)

        assert code == 0
        assert "Logging initialized" in log_file.read_text(encoding="utf-8")


class TestFailures:
    """Every failure exits with status 1 and prints nothing on stdout."""

    @pytest.mark.parametrize("args", [[], ["only-one.ttf"], ["a.ttf", "A", "extra"]])
    def test_wrong_argument_count(self, capsys, args):
        code, out, err = run(capsys, *args)

        assert code == 1
        assert out == ""
        assert "Usage: glyphoutline <font_path.ttf> <character>" in err

    def test_multi_character(self, capsys, truetype_font):
        code, out, err = run(capsys, truetype_font, "AB")

        assert code == 1
        assert out == ""
        assert "[usage]" in err

    def test_missing_glyph(self, capsys, truetype_font):
        code, out, err = run(capsys, truetype_font, "Z")

        assert code == 1
        assert out == ""
        assert "[lookup]" in err
        assert "Glyph not found for character 'Z'" in err

    def test_non_outline_font(self, capsys, outlineless_font):
        code, out, err = run(capsys, outlineless_font, "A")

        assert code == 1
        assert out == ""
        assert "[format]" in err

    def test_not_a_font(self, capsys, not_a_font):
        code, out, err = run(capsys, not_a_font, "A")

        assert code == 1
        assert out == ""
        assert "[open]" in err

    def test_missing_file(self, capsys, tmp_path):
        code, _, err = run(capsys, tmp_path / "missing.ttf", "A")

        assert code == 1
        assert "[open]" in err

    def test_negative_face_index(self, capsys, truetype_font):
        code, out, err = run(capsys, truetype_font, "A", "--face-index", "-1")

        assert code == 1
        assert out == ""
        assert "[engine]" in err

    def test_invalid_log_level(self, capsys, truetype_font):
        code, _, err = run(capsys, truetype_font, "A", "--log-level", "LOUD")

        assert code == 1
        assert "Invalid log level" in err

    def test_non_integer_face_index(self, capsys, truetype_font):
        code, out, err = run(capsys, truetype_font, "A", "--face-index", "two")

        assert code == 1
        assert out == ""
        assert "[usage]" in err

    def test_unknown_option(self, capsys, truetype_font):
        code, out, err = run(capsys, truetype_font, "A", "--scale", "2")

        assert code == 1
        assert out == ""
        assert "Usage: glyphoutline <font_path.ttf> <character>" in err

    def test_log_file_in_missing_directory(self, capsys, tmp_path, truetype_font):
        code, out, err = run(capsys, truetype_font, "A", "--log-file", tmp_path / "nodir" / "x.log")

        assert code == 1
        assert out == ""
        assert "[logging]" in err
        assert "nodir" in err

    def test_log_file_is_directory(self, capsys, tmp_path, truetype_font):
        code, out, err = run(capsys, truetype_font, "A", "--log-file", tmp_path)

        assert code == 1
        assert out == ""
        assert "[logging]" in err
