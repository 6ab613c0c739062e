"""Tests for YAML preset loading."""

import logging
import textwrap

import pytest

from slice_text.config import PresetConfig, list_presets, load_preset
from slice_text.matchers import SliceOptions
from slice_text.pipeline import slice_text
from slice_text.spans import Span


def _write_presets(directory, body):
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / "presets.yaml"
    path.write_text(textwrap.dedent(body), encoding="utf-8")
    return path


class TestPackageDefaults:
    def test_builtin_presets_listed(self):
        assert list_presets() == ["default", "exact", "prefix", "raw", "substring", "suffix"]

    def test_default_matches_slice_options_defaults(self):
        assert load_preset("default") == SliceOptions()

    def test_raw_disables_escaping(self):
        assert load_preset("raw") == SliceOptions(escape=False)

    def test_prefix_and_suffix(self):
        assert load_preset("prefix").boundary == "start"
        assert load_preset("suffix").boundary == "end"

    def test_unknown_preset_raises(self):
        with pytest.raises(ValueError, match="Available presets: default"):
            load_preset("nonexistent")


class TestOverrides:
    def test_project_preset_added(self, tmp_path):
        _write_presets(
            tmp_path / ".slice-text",
            """
            presets:
              tags:
                boundary: start
                caseSensitive: true
            """,
        )
        assert "tags" in list_presets()
        assert load_preset("tags") == SliceOptions(boundary="start", case_sensitive=True)

    def test_user_overrides_project_and_defaults(self, tmp_path, isolated_config_dirs):
        _write_presets(
            tmp_path / ".slice-text",
            """
            presets:
              default:
                boundary: end
            """,
        )
        _write_presets(
            isolated_config_dirs / ".config" / "slice-text",
            """
            presets:
              default:
                boundary: false
            """,
        )
        assert load_preset("default") == SliceOptions(boundary=False)

    def test_untouched_defaults_still_inherited(self, tmp_path):
        _write_presets(
            tmp_path / ".slice-text",
            """
            presets:
              default:
                case_sensitive: true
            """,
        )
        config = PresetConfig()
        assert config.get("default") == SliceOptions(case_sensitive=True)
        assert config.get("raw") == SliceOptions(escape=False)

    def test_custom_app_name(self, tmp_path):
        _write_presets(
            tmp_path / ".myapp",
            """
            presets:
              only-mine:
                escape: false
            """,
        )
        assert "only-mine" in list_presets(app_name="myapp")
        assert "only-mine" not in list_presets()

    def test_malformed_file_logged_and_skipped(self, tmp_path, caplog):
        _write_presets(tmp_path / ".slice-text", "presets: [unclosed\n")
        with caplog.at_level(logging.WARNING, logger="slice_text.config"):
            names = list_presets()
        assert "default" in names
        assert "Skipping malformed preset file" in caplog.text

    def test_top_level_list_skipped(self, tmp_path, caplog):
        _write_presets(tmp_path / ".slice-text", "- default\n- raw\n")
        with caplog.at_level(logging.WARNING, logger="slice_text.config"):
            assert load_preset("default") == SliceOptions()
        assert "top level is not a mapping" in caplog.text

    @pytest.mark.parametrize("body", ["1", "some-string", "[true]"])
    def test_non_mapping_preset_body_skipped(self, tmp_path, caplog, body):
        _write_presets(
            tmp_path / ".slice-text",
            f"presets:\n  broken: {body}\n  tags:\n    boundary: start\n",
        )
        with caplog.at_level(logging.WARNING, logger="slice_text.config"):
            names = list_presets()
        assert "broken" not in names
        assert "tags" in names
        assert "Skipping preset 'broken'" in caplog.text

    def test_undecodable_file_skipped(self, tmp_path, caplog):
        preset_dir = tmp_path / ".slice-text"
        preset_dir.mkdir()
        (preset_dir / "presets.yaml").write_bytes(b"presets:\n  caf\xe9:\n    escape: false\n")
        with caplog.at_level(logging.WARNING, logger="slice_text.config"):
            names = list_presets()
        assert names == ["default", "exact", "prefix", "raw", "substring", "suffix"]
        assert "Skipping malformed preset file" in caplog.text

    def test_wrong_shape_file_does_not_break_slicing(self, tmp_path):
        _write_presets(tmp_path / ".slice-text", "- not\n- a\n- mapping\n")
        result = slice_text("Hello world", ["world"], "default")
        assert result == [Span(0, 6, False), Span(6, 11, True)]

    def test_file_without_presets_block_ignored(self, tmp_path):
        _write_presets(tmp_path / ".slice-text", "other: 1\n")
        assert list_presets() == ["default", "exact", "prefix", "raw", "substring", "suffix"]

    def test_invalid_option_in_preset_raises_on_use(self, tmp_path):
        _write_presets(
            tmp_path / ".slice-text",
            """
            presets:
              broken:
                boundary: middle
            """,
        )
        config = PresetConfig()
        assert "broken" in config.names()
        with pytest.raises(ValueError, match="Invalid boundary mode"):
            config.get("broken")

    def test_get_raw_presets_is_a_copy(self):
        config = PresetConfig()
        raw = config.get_raw_presets()
        raw["default"]["escape"] = False
        assert config.get("default").escape is True
