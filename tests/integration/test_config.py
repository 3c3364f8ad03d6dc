"""Integration tests for settings resolution."""

from pathlib import Path

from config import Settings, load_settings, DEFAULT_THRESHOLD


class TestLoadSettings:
    """Test defaults, YAML file and environment precedence."""

    def test_defaults(self, temp_dir):
        settings = load_settings(temp_dir / "missing.yaml")
        assert settings == Settings()

    def test_yaml_file(self, temp_dir):
        path = temp_dir / "explorer.yaml"
        path.write_text(
            "data_path: faqs.json\nsearch_threshold: 70\nignore_location: false\npreview_size: 3\n"
        )
        settings = load_settings(path)
        assert settings.data_path == Path("faqs.json")
        assert settings.search_threshold == 70
        assert settings.ignore_location is False
        assert settings.preview_size == 3

    def test_env_overrides_yaml(self, temp_dir, monkeypatch):
        path = temp_dir / "explorer.yaml"
        path.write_text("preview_size: 3\nintro_marker: about\n")
        monkeypatch.setenv("FAQ_PREVIEW_SIZE", "7")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        settings = load_settings(path)
        assert settings.preview_size == 7
        assert settings.intro_marker == "about"
        assert settings.log_level == "DEBUG"

    def test_invalid_number_falls_back(self, temp_dir, monkeypatch):
        monkeypatch.setenv("FAQ_SEARCH_THRESHOLD", "strict")
        assert load_settings(temp_dir / "missing.yaml").search_threshold == DEFAULT_THRESHOLD

    def test_non_mapping_yaml_ignored(self, temp_dir):
        path = temp_dir / "explorer.yaml"
        path.write_text("- just\n- a list\n")
        assert load_settings(path) == Settings()
