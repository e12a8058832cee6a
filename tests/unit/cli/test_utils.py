"""Unit tests for CLI utilities."""

from modmap.cli.utils import echo_error, echo_success, load_settings


class TestUtils:
    def test_load_settings_defaults(self, tmp_path):
        settings = load_settings(tmp_path)
        assert settings is not None
        assert settings.source is None

    def test_load_settings_from_file(self, tmp_path):
        (tmp_path / "modmap.toml").write_text("[viewport]\nnode_size = 12\n")
        settings = load_settings(tmp_path)
        assert settings.viewport.node_size == 12

    def test_load_settings_malformed(self, tmp_path, capsys):
        (tmp_path / "modmap.toml").write_text("[viewport\n")
        assert load_settings(tmp_path) is None
        captured = capsys.readouterr()
        assert "Failed to parse settings" in captured.err

    def test_echo_streams(self, capsys):
        echo_success("done")
        echo_error("broken")
        captured = capsys.readouterr()
        assert "done" in captured.out
        assert "broken" in captured.err
