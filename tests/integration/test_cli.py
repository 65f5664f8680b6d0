"""Integration tests for mdpage CLI commands."""

from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from mdpage import __version__
from mdpage import cli
from mdpage.cli import app
from mdpage.config import MdpageConfig, load_config
from tests.fixtures import INTERVIEW_DOCUMENT

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every CLI test from an empty working directory."""
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


class TestRender:
    """Integration tests for `mdpage render`."""

    def test_render_to_stdout(self, hello_document: Path) -> None:
        """Test the page is printed to stdout."""
        result = runner.invoke(app, ["render", "--document", str(hello_document)])

        assert result.exit_code == 0, result.output
        assert "Hello</h1>" in result.stdout
        assert "<!DOCTYPE html>" in result.stdout

    def test_render_to_file(self, tmp_path: Path) -> None:
        """Test --output writes the page."""
        output_path = tmp_path / "site" / "index.html"

        result = runner.invoke(
            app,
            ["render", "--document", str(INTERVIEW_DOCUMENT), "--output", str(output_path)],
        )

        assert result.exit_code == 0, result.output
        content = output_path.read_text(encoding="utf-8")
        assert "Next.js Interview Questions</h1>" in content
        assert "<table>" in content

    def test_render_default_document_from_cwd(self, isolated_cwd: Path) -> None:
        """Test README.md in the working directory is the default document."""
        (isolated_cwd / "README.md").write_text("# From cwd", encoding="utf-8")

        result = runner.invoke(app, ["render"])

        assert result.exit_code == 0, result.output
        assert "From cwd</h1>" in result.stdout

    def test_render_missing_document_fails(self, tmp_path: Path) -> None:
        """Test a missing document exits with code 1 and writes nothing."""
        output_path = tmp_path / "index.html"

        result = runner.invoke(
            app,
            ["render", "--document", str(tmp_path / "missing.md"), "--output", str(output_path)],
        )

        assert result.exit_code == 1
        assert not output_path.exists()

    def test_render_uses_config_file(self, tmp_path: Path, hello_document: Path) -> None:
        """Test --config settings reach the page."""
        config_file = tmp_path / "mdpage.yaml"
        config_file.write_text(
            yaml.safe_dump(
                {
                    "document": {"path": str(hello_document)},
                    "page": {"title": "Team Handbook"},
                }
            )
        )

        result = runner.invoke(app, ["--config", str(config_file), "render"])

        assert result.exit_code == 0, result.output
        assert "Team Handbook" in result.stdout
        assert "Hello</h1>" in result.stdout

    def test_invalid_config_fails(self, tmp_path: Path) -> None:
        """Test invalid configuration values exit with code 1."""
        config_file = tmp_path / "mdpage.yaml"
        config_file.write_text("server:\n  port: 0\n")

        result = runner.invoke(app, ["--config", str(config_file), "render"])

        assert result.exit_code == 1

    def test_unknown_encoding_config_fails(self, tmp_path: Path) -> None:
        """Test an unknown document encoding exits with code 1."""
        config_file = tmp_path / "mdpage.yaml"
        config_file.write_text("document:\n  encoding: no-such-codec\n")

        result = runner.invoke(app, ["--config", str(config_file), "render"])

        assert result.exit_code == 1


class TestServe:
    """Integration tests for `mdpage serve`."""

    def test_serve_passes_overrides(
        self,
        hello_document: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test host, port and document overrides reach the server."""
        calls: list[tuple[MdpageConfig, str | None, int | None]] = []

        def fake_run_server(
            config: MdpageConfig,
            host: str | None = None,
            port: int | None = None,
        ) -> None:
            calls.append((config, host, port))

        monkeypatch.setattr("mdpage.server.run_server", fake_run_server)

        result = runner.invoke(
            app,
            ["serve", "--host", "0.0.0.0", "--port", "8080", "--document", str(hello_document)],
        )

        assert result.exit_code == 0, result.output
        config, host, port = calls[0]
        assert host == "0.0.0.0"
        assert port == 8080
        assert config.document.path == str(hello_document)

    def test_serve_rejects_invalid_port(self) -> None:
        """Test out-of-range ports are rejected by the CLI."""
        result = runner.invoke(app, ["serve", "--port", "70000"])

        assert result.exit_code != 0


class TestInit:
    """Integration tests for `mdpage init`."""

    def test_init_creates_config(self, isolated_cwd: Path) -> None:
        """Test init writes a loadable default config."""
        result = runner.invoke(app, ["init"])

        assert result.exit_code == 0, result.output
        config_file = isolated_cwd / ".mdpage" / "config.yaml"
        assert config_file.exists()

        config = load_config(config_file)
        assert config.document.path == "README.md"
        assert config.page.title == "Mastering Next.js Interview"

    def test_init_refuses_to_overwrite(self, isolated_cwd: Path) -> None:
        """Test init keeps an existing config unless --force is given."""
        config_file = isolated_cwd / ".mdpage" / "config.yaml"
        config_file.parent.mkdir()
        config_file.write_text("document:\n  path: KEEP.md\n")

        result = runner.invoke(app, ["init"])

        assert result.exit_code == 1
        assert "KEEP.md" in config_file.read_text()

        result = runner.invoke(app, ["init", "--force"])

        assert result.exit_code == 0
        assert "KEEP.md" not in config_file.read_text()


class TestGlobalOptions:
    """Tests for global CLI options."""

    def test_version(self) -> None:
        """Test --version prints the version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_missing_config_file(self, tmp_path: Path) -> None:
        """Test a nonexistent --config path is rejected."""
        result = runner.invoke(app, ["--config", str(tmp_path / "nope.yaml"), "render"])

        assert result.exit_code != 0


class TestDocumentOverride:
    """Tests for applying --document to the loaded config."""

    def test_override_leaves_loaded_config_untouched(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test --document returns a copy instead of editing the shared config."""
        loaded = MdpageConfig()
        monkeypatch.setattr(cli, "_config", loaded)

        overridden = cli._get_config(Path("OTHER.md"))

        assert overridden.document.path == "OTHER.md"
        assert loaded.document.path == "README.md"
        assert cli._get_config().document.path == "README.md"

    def test_override_keeps_encoding(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the configured encoding survives the path override."""
        loaded = MdpageConfig()
        loaded.document.encoding = "latin-1"
        monkeypatch.setattr(cli, "_config", loaded)

        overridden = cli._get_config(Path("OTHER.md"))

        assert overridden.document.encoding == "latin-1"
