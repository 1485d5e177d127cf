"""Tests for the Sketch design-file exporter."""

from pathlib import Path
from unittest.mock import patch

import pytest

from tessera.core.errors import ExporterToolError, InvalidSourceFileError, UnsupportedPlatformError
from tessera.designfile import SketchExporter, get_exporter


@pytest.fixture
def sketch_app(tmp_path):
    """A fake Sketch.app bundle containing sketchtool."""
    app = tmp_path / "Applications" / "Sketch.app"
    sketchtool = app / "Contents" / "Resources" / "sketchtool" / "bin" / "sketchtool"
    sketchtool.parent.mkdir(parents=True)
    sketchtool.write_text("")
    return app


@pytest.fixture
def on_mac(monkeypatch):
    monkeypatch.setattr("tessera.designfile.exporters.sketch.sys.platform", "darwin")


class TestCanParse:
    def test_rejects_other_extensions(self, tmp_path):
        for name in ("test.ai", "test.sketchster"):
            (tmp_path / name).write_text("")
            assert SketchExporter.can_parse(tmp_path / name) is False

    def test_rejects_missing_file(self, tmp_path):
        assert SketchExporter.can_parse(tmp_path / "test.sketch") is False

    def test_accepts_sketch_files(self, tmp_path):
        nested = tmp_path / "my" / "awesome" / "path"
        nested.mkdir(parents=True)
        (nested / "test.sketch").write_text("")
        assert SketchExporter.can_parse(nested / "test.sketch") is True
        assert SketchExporter.can_parse(str(nested / "test.sketch")) is True

    def test_accepts_trailing_whitespace(self, tmp_path):
        source = f"{tmp_path}/cuboid.sketch  "
        Path(source).write_text("")
        assert SketchExporter.can_parse(source) is True


class TestExportSvg:
    def test_runs_sketchtool_commands(self, tmp_path, sketch_app, on_mac):
        source = tmp_path / "test.sketch"
        source.write_text("")
        sketchtool = sketch_app / "Contents" / "Resources" / "sketchtool" / "bin" / "sketchtool"
        messages = []

        with patch(
            "tessera.designfile.commands.run_command",
            side_effect=[str(sketch_app), "", ""],
        ) as run_command:
            SketchExporter().export_svg(str(source), Path("outdir"), on_progress=messages.append)

        assert [call.args[0] for call in run_command.call_args_list] == [
            ["mdfind", "kMDItemCFBundleIdentifier=com.bohemiancoding.sketch3"],
            [str(sketchtool), "export", "--format=svg", "--output=outdir/slices", "slices", str(source)],
            [str(sketchtool), "export", "--format=svg", "--output=outdir/artboards", "artboards", str(source)],
        ]
        assert messages[0] == "Locating sketchtool"

    def test_missing_file_is_invalid_before_any_command(self, tmp_path, on_mac):
        with patch("tessera.designfile.commands.run_command") as run_command:
            with pytest.raises(InvalidSourceFileError):
                SketchExporter().export_svg(tmp_path / "missing.sketch", tmp_path / "out")
        run_command.assert_not_called()

    @pytest.mark.parametrize("name", ["test.ai", "test.sketchster"])
    def test_rejects_unparseable_sources(self, tmp_path, on_mac, name):
        (tmp_path / name).write_text("")
        with patch("tessera.designfile.commands.run_command") as run_command:
            with pytest.raises(InvalidSourceFileError, match="Invalid source file."):
                SketchExporter().export_svg(tmp_path / name, tmp_path / "out")
        run_command.assert_not_called()

    def test_rejects_other_platforms_before_running_commands(self, tmp_path, monkeypatch):
        monkeypatch.setattr("tessera.designfile.exporters.sketch.sys.platform", "win32")
        (tmp_path / "test.sketch").write_text("")
        with patch("tessera.designfile.commands.run_command") as run_command:
            with pytest.raises(UnsupportedPlatformError):
                SketchExporter().export_svg(tmp_path / "test.sketch", tmp_path / "out")
        run_command.assert_not_called()

    def test_command_failure_propagates(self, tmp_path, on_mac):
        (tmp_path / "test.sketch").write_text("")
        with patch("tessera.designfile.commands.run_command", side_effect=ExporterToolError("Whoops!")):
            with pytest.raises(ExporterToolError, match="Whoops!"):
                SketchExporter().export_svg(tmp_path / "test.sketch", tmp_path / "out")

    def test_sketch_not_installed(self, tmp_path, on_mac):
        (tmp_path / "test.sketch").write_text("")
        with patch("tessera.designfile.commands.run_command", return_value=""):
            with pytest.raises(ExporterToolError, match="Unable to locate"):
                SketchExporter().export_svg(tmp_path / "test.sketch", tmp_path / "out")


class TestGetExporter:
    def test_sketch(self, tmp_path):
        (tmp_path / "icons.sketch").write_text("")
        assert isinstance(get_exporter(tmp_path / "icons.sketch"), SketchExporter)

    def test_unknown(self, tmp_path):
        (tmp_path / "icons.fig").write_text("")
        with pytest.raises(InvalidSourceFileError):
            get_exporter(tmp_path / "icons.fig")
