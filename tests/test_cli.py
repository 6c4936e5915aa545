"""Tests for the command-line interface."""

from typer.testing import CliRunner

from keyboard_theory.cli import app

runner = CliRunner()


class TestDetectCommand:

    def test_detect_major(self):
        result = runner.invoke(app, ["detect", "C4", "E4", "G4"])
        assert result.exit_code == 0
        assert "C Major" in result.output
        assert "Detected Chords" in result.output

    def test_detect_inversion_shows_bass(self):
        result = runner.invoke(app, ["detect", "E4", "G4", "C5"])
        assert result.exit_code == 0
        assert "C/E" in result.output

    def test_detect_all(self):
        result = runner.invoke(app, ["detect", "C4", "E4", "G4", "A4", "--all", "-n", "3"])
        assert result.exit_code == 0
        assert "C6" in result.output

    def test_detect_json(self):
        result = runner.invoke(app, ["detect", "C4", "D#4", "G4", "--json"])
        assert result.exit_code == 0
        assert '"root": "C"' in result.output
        assert '"quality": "Minor"' in result.output

    def test_single_note(self):
        result = runner.invoke(app, ["detect", "C4"])
        assert result.exit_code == 0
        assert "No chord" in result.output

    def test_invalid_note(self):
        result = runner.invoke(app, ["detect", "C4", "H4"])
        assert result.exit_code == 1
        assert "Invalid note name" in result.output

    def test_verbose_flag(self):
        result = runner.invoke(app, ["-v", "detect", "C4", "E4", "G4"])
        assert result.exit_code == 0


class TestTheoryCommands:

    def test_scale(self):
        result = runner.invoke(app, ["scale", "C", "major"])
        assert result.exit_code == 0
        assert "C D E F G A B" in result.output

    def test_scale_with_octave(self):
        result = runner.invoke(app, ["scale", "A", "minor", "--octave", "3"])
        assert result.exit_code == 0
        assert "A3 B3 C4 D4 E4 F4 G4 A4" in result.output

    def test_unknown_scale(self):
        result = runner.invoke(app, ["scale", "C", "bebop"])
        assert result.exit_code == 1
        assert "Unknown scale" in result.output

    def test_chord(self):
        result = runner.invoke(app, ["chord", "C", "m7"])
        assert result.exit_code == 0
        assert "C - D# - G - A#" in result.output

    def test_unknown_chord(self):
        result = runner.invoke(app, ["chord", "C", "m13b9"])
        assert result.exit_code == 1

    def test_interval(self):
        result = runner.invoke(app, ["interval", "7"])
        assert result.exit_code == 0
        assert "Perfect 5th" in result.output

    def test_catalog(self):
        result = runner.invoke(app, ["catalog"])
        assert result.exit_code == 0
        assert "Chord Catalog" in result.output
        assert "maj7" in result.output

    def test_catalog_category(self):
        result = runner.invoke(app, ["catalog", "--category", "triad"])
        assert result.exit_code == 0
        assert "Augmented" in result.output
        assert "Dominant" not in result.output

    def test_catalog_unknown_category(self):
        result = runner.invoke(app, ["catalog", "--category", "cluster"])
        assert result.exit_code == 1

    def test_suggest(self):
        result = runner.invoke(app, ["suggest", "G3", "B3", "D4", "--key", "C"])
        assert result.exit_code == 0
        assert "V" in result.output
        assert "Am" in result.output
