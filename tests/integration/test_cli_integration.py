"""
CLI integration tests for configster commands.

Tests complete command execution through Click's test runner.
"""

import json

import pytest
from click.testing import CliRunner

from configster import __version__
from configster.cli import cli
from configster.core.exceptions import ExitCode

pytestmark = pytest.mark.integration


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def conf_file(isolated_cli):
    """Create a well-formed config file."""
    conf = isolated_cli / "app.conf"
    conf.write_text("""# Test config
ExampleOption = 12
ExampleOption2 = /home/foo/bar, optional, attribute
DelayOff

color = Green
color = Blue
""")
    return conf


@pytest.fixture
def bad_conf_file(isolated_cli):
    """Create a config file with malformed option lines."""
    conf = isolated_cli / "bad.conf"
    conf.write_text("good = 1\nOption  /home/foo\nalso good = 2\nlast = 3\n")
    return conf


class TestCliBasics:
    """Test help and version output."""

    def test_help_shows_commands(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "parse" in result.output
        assert "check" in result.output
        assert "version" in result.output

    def test_version_option(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "configster" in result.output
        assert __version__ in result.output

    def test_version_command(self, runner):
        result = runner.invoke(cli, ["version"])
        assert result.exit_code == 0
        assert result.output.strip() == __version__


class TestParseCommand:
    """Integration tests for the parse command."""

    def test_json_output(self, runner, conf_file):
        result = runner.invoke(cli, ["-q", "parse", str(conf_file), "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [d["option"] for d in data] == [
            "ExampleOption", "ExampleOption2", "DelayOff", "color", "color",
        ]
        assert data[1]["value"] == {
            "primary": "/home/foo/bar",
            "attributes": ["optional", "attribute"],
        }
        assert data[2]["value"] == {"primary": "", "attributes": []}

    def test_text_output(self, runner, conf_file):
        result = runner.invoke(cli, ["-q", "parse", str(conf_file), "-f", "text"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "ExampleOption\t12"
        assert lines[-1] == "color\tBlue"

    def test_table_output(self, runner, conf_file):
        result = runner.invoke(cli, ["-q", "parse", str(conf_file)])
        assert result.exit_code == 0
        assert "ExampleOption" in result.output
        assert "Green" in result.output

    def test_custom_delimiter(self, runner, isolated_cli):
        conf = isolated_cli / "semi.conf"
        conf.write_text("path = /usr/bin; /bin\n")
        result = runner.invoke(cli, ["-q", "parse", str(conf), "-d", ";", "-f", "json"])
        assert result.exit_code == 0
        assert json.loads(result.output)[0]["value"]["attributes"] == ["/bin"]

    def test_invalid_delimiter(self, runner, conf_file):
        result = runner.invoke(cli, ["parse", str(conf_file), "-d", "::"])
        assert result.exit_code == ExitCode.INVALID_ARGUMENT
        assert "single character" in result.output

    def test_stdin(self, runner):
        result = runner.invoke(cli, ["-q", "parse", "-", "-f", "json"], input="a = 1, x\n#c\nb\n")
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data == [
            {"option": "a", "value": {"primary": "1", "attributes": ["x"]}},
            {"option": "b", "value": {"primary": "", "attributes": []}},
        ]

    def test_stdin_matches_file(self, runner, isolated_cli):
        content = "a = x\x0cb = y\nc = z\n"
        conf = isolated_cli / "ff.conf"
        conf.write_text(content, encoding="utf-8")
        from_file = runner.invoke(cli, ["-q", "parse", str(conf), "-f", "json"])
        from_stdin = runner.invoke(cli, ["-q", "parse", "-", "-f", "json"], input=content)
        assert from_file.exit_code == from_stdin.exit_code == 0
        assert json.loads(from_stdin.output) == json.loads(from_file.output)
        assert len(json.loads(from_stdin.output)) == 2

    def test_stdin_uses_encoding(self, runner):
        result = runner.invoke(
            cli, ["-q", "parse", "-", "--encoding", "latin-1", "-f", "json"],
            input=b"name = caf\xe9\n",
        )
        assert result.exit_code == 0
        assert json.loads(result.output)[0]["value"]["primary"] == "café"

    def test_stdin_decode_error(self, runner):
        result = runner.invoke(cli, ["parse", "-"], input=b"name = caf\xe9\n")
        assert result.exit_code == ExitCode.DECODE_ERROR
        assert "Cannot decode" in result.output

    def test_lenient_keeps_malformed_marker(self, runner, bad_conf_file):
        result = runner.invoke(cli, ["-q", "parse", str(bad_conf_file), "-f", "json"])
        assert result.exit_code == 0
        options = [d["option"] for d in json.loads(result.output)]
        assert options == ["good", "InvalidOption_on_Line2", "InvalidOption_on_Line3", "last"]

    def test_strict_fails_on_malformed(self, runner, bad_conf_file):
        result = runner.invoke(cli, ["parse", str(bad_conf_file), "--strict"])
        assert result.exit_code == ExitCode.MALFORMED_OPTIONS
        assert "2 malformed options on lines 2, 3" in result.output

    def test_strict_passes_on_clean_file(self, runner, conf_file):
        result = runner.invoke(cli, ["-q", "parse", str(conf_file), "--strict", "-f", "json"])
        assert result.exit_code == 0
        assert len(json.loads(result.output)) == 5

    def test_missing_file(self, runner, isolated_cli):
        result = runner.invoke(cli, ["parse", str(isolated_cli / "nonexistent.conf")])
        assert result.exit_code == ExitCode.FILE_ERROR
        assert "File not found" in result.output

    def test_missing_file_json_errors(self, runner, isolated_cli):
        missing = isolated_cli / "nonexistent.conf"
        result = runner.invoke(cli, ["--json-errors", "parse", str(missing)])
        assert result.exit_code == ExitCode.FILE_ERROR
        error = json.loads(result.output)["error"]
        assert error["type"] == "FileNotFoundError"
        assert error["path"] == str(missing)

    def test_decode_error(self, runner, isolated_cli):
        conf = isolated_cli / "latin1.conf"
        conf.write_bytes(b"name = caf\xe9\n")
        result = runner.invoke(cli, ["parse", str(conf)])
        assert result.exit_code == ExitCode.DECODE_ERROR
        assert "Cannot decode" in result.output

    def test_encoding_option(self, runner, isolated_cli):
        conf = isolated_cli / "latin1.conf"
        conf.write_bytes(b"name = caf\xe9\n")
        result = runner.invoke(cli, ["-q", "parse", str(conf), "--encoding", "latin-1", "-f", "json"])
        assert result.exit_code == 0
        assert json.loads(result.output)[0]["value"]["primary"] == "café"


class TestSettingsFile:
    """Integration tests for .configster.yaml defaults."""

    def test_settings_provide_defaults(self, runner, isolated_cli):
        (isolated_cli / ".configster.yaml").write_text(
            "parser:\n  delimiter: '|'\noutput:\n  format: json\n"
        )
        conf = isolated_cli / "pipe.conf"
        conf.write_text("list = a | b | c\n")
        result = runner.invoke(cli, ["-q", "parse", str(conf)])
        assert result.exit_code == 0
        assert json.loads(result.output)[0]["value"] == {"primary": "a", "attributes": ["b", "c"]}

    def test_cli_overrides_settings(self, runner, isolated_cli):
        (isolated_cli / ".configster.yaml").write_text("output:\n  format: json\n")
        conf = isolated_cli / "a.conf"
        conf.write_text("a = 1\n")
        result = runner.invoke(cli, ["-q", "parse", str(conf), "-f", "text"])
        assert result.exit_code == 0
        assert result.output.strip() == "a\t1"

    def test_strict_from_settings(self, runner, isolated_cli, bad_conf_file):
        (isolated_cli / ".configster.yaml").write_text("check:\n  strict: true\n")
        result = runner.invoke(cli, ["parse", str(bad_conf_file)])
        assert result.exit_code == ExitCode.MALFORMED_OPTIONS

        result = runner.invoke(cli, ["-q", "parse", str(bad_conf_file), "--lenient", "-f", "json"])
        assert result.exit_code == 0


class TestCheckCommand:
    """Integration tests for the check command."""

    def test_clean_file(self, runner, conf_file):
        result = runner.invoke(cli, ["-q", "check", str(conf_file)])
        assert result.exit_code == 0
        assert "5 option line(s), none malformed" in result.output

    def test_reports_malformed_lines(self, runner, bad_conf_file):
        result = runner.invoke(cli, ["-q", "check", str(bad_conf_file)])
        assert result.exit_code == ExitCode.MALFORMED_OPTIONS
        assert ":2: whitespace in option name 'Option  /home/foo'" in result.output
        assert ":3: whitespace in option name 'also good = 2'" in result.output
        assert "2 malformed of 4 option line(s)" in result.output

    def test_missing_file(self, runner, isolated_cli):
        result = runner.invoke(cli, ["check", str(isolated_cli / "missing.conf")])
        assert result.exit_code == ExitCode.FILE_ERROR

    def test_json_errors_reports_malformed_lines(self, runner, bad_conf_file):
        result = runner.invoke(cli, ["-q", "--json-errors", "check", str(bad_conf_file)])
        assert result.exit_code == ExitCode.MALFORMED_OPTIONS
        error = json.loads(result.output[result.output.index("{"):])["error"]
        assert error["type"] == "MalformedOptions"
        assert error["line_numbers"] == [2, 3]


class TestVerbosity:
    """Test logging flags reach the parser."""

    def test_verbose_logs_record_count(self, runner, conf_file):
        result = runner.invoke(cli, ["-v", "parse", str(conf_file), "-f", "text"])
        assert result.exit_code == 0
        assert "Parsed 5 option(s)" in result.output

    def test_default_warns_on_malformed(self, runner, bad_conf_file):
        result = runner.invoke(cli, ["parse", str(bad_conf_file), "-f", "text"])
        assert result.exit_code == 0
        assert "Whitespace in option name" in result.output
