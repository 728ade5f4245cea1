"""
Integration tests for the rt-options command line.

Covers the full workflow from options file to validation result.
"""

import pytest

from rt_options import Options
from rt_options.cli import main
from rt_options.options import define_version
from rt_options.config import save_options


@pytest.fixture
def valid_file(tmp_path):
    """Options file with two valid profiles."""
    first = Options()
    first.create(2)
    first.use_emissivity = True
    first.emissivity = [0.9, 0.95]
    path = tmp_path / "valid.yaml"
    save_options([first, Options()], path)
    return path


@pytest.fixture
def invalid_file(tmp_path):
    """Options file with one invalid profile."""
    bad = Options()
    bad.create(1)
    bad.use_direct_reflectivity = True
    bad.direct_reflectivity = [1.5]
    path = tmp_path / "invalid.json"
    save_options([Options(), bad], path)
    return path


class TestCheckCommand:
    """Tests for the options file check."""

    def test_valid_file(self, valid_file, capsys):
        """Test a valid file exits with 0 and displays every profile."""
        assert main([str(valid_file)]) == 0
        out = capsys.readouterr().out
        assert out.count("Options OBJECT") == 2
        assert "2 profile(s) valid" in out

    def test_invalid_file(self, invalid_file, capsys):
        """Test an invalid profile exits with 1."""
        assert main([str(invalid_file), "--quiet"]) == 1
        out = capsys.readouterr().out
        assert "Options OBJECT" not in out
        assert "1 of 2 profile(s) invalid: [1]" in out

    def test_missing_file(self, tmp_path):
        """Test a missing file is reported as a failure."""
        assert main([str(tmp_path / "missing.yaml")]) == 1

    def test_version(self, capsys):
        """Test the version option."""
        with pytest.raises(SystemExit) as excinfo:
            main(["--version"])
        assert excinfo.value.code == 0
        assert define_version() in capsys.readouterr().out
