"""Tests for dummyfiles_core.config: models and YAML loader."""

import os
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml
from pydantic import ValidationError

from dummyfiles_core.config.loader import (
    DEFAULT_CONFIG_TEMPLATE,
    _expand_env_vars,
    candidate_paths,
    load_config,
)
from dummyfiles_core.config.models import (
    DummyFilesConfig,
    FlattenConfig,
    MarkerConfig,
    ReportConfig,
)


# ── DummyFilesConfig defaults ────────────────────────────────────────


class TestDummyFilesConfigDefaults:
    def test_default_log_level(self, sample_config):
        assert sample_config.log_level == "info"

    def test_default_marker_encoding(self, sample_config):
        assert sample_config.marker.encoding == "latin-1"

    def test_default_ignore_prefix(self, sample_config):
        assert sample_config.marker.ignore_prefix == "content"

    def test_default_flatten(self, sample_config):
        assert sample_config.flatten.basename == "dummy"
        assert sample_config.flatten.start_index == 100

    def test_default_report_path(self, sample_config):
        expected = Path(tempfile.gettempdir()) / "dummy-report.html"
        assert Path(sample_config.report.html_path) == expected


# ── Individual config model validations ──────────────────────────────


class TestMarkerConfig:
    @pytest.mark.parametrize("encoding", ["latin-1", "iso-8859-1", "cp1252", "ascii"])
    def test_single_byte_encodings(self, encoding):
        assert MarkerConfig(encoding=encoding).encoding == encoding

    @pytest.mark.parametrize("encoding", ["utf-8", "utf-16"])
    def test_multi_byte_encoding_rejected(self, encoding):
        with pytest.raises(ValidationError):
            MarkerConfig(encoding=encoding)

    def test_unknown_encoding_rejected(self):
        with pytest.raises(ValidationError):
            MarkerConfig(encoding="no-such-codec")


class TestFlattenConfig:
    def test_custom_values(self):
        cfg = FlattenConfig(basename="file", start_index=0)
        assert cfg.basename == "file"
        assert cfg.start_index == 0

    def test_empty_basename_rejected(self):
        with pytest.raises(ValidationError):
            FlattenConfig(basename="")

    @pytest.mark.parametrize("name", ["a/b", "a\\b"])
    def test_basename_with_separator_rejected(self, name):
        with pytest.raises(ValidationError):
            FlattenConfig(basename=name)

    def test_negative_start_index_rejected(self):
        with pytest.raises(ValidationError):
            FlattenConfig(start_index=-1)


class TestReportConfig:
    def test_custom_path(self):
        assert ReportConfig(html_path="/tmp/x.html").html_path == "/tmp/x.html"


def test_invalid_log_level():
    with pytest.raises(ValidationError):
        DummyFilesConfig(log_level="verbose")


# ── load_config ──────────────────────────────────────────────────────


class TestLoadConfig:
    def test_defaults_when_no_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with patch.object(Path, "home", return_value=tmp_path / "home"):
            cfg = load_config()
        assert cfg == DummyFilesConfig()

    def test_explicit_path(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        path = tmp_path / "custom.yaml"
        path.write_text(yaml.dump({"flatten": {"basename": "moved"}, "log_level": "debug"}))
        cfg = load_config(str(path))
        assert cfg.flatten.basename == "moved"
        assert cfg.flatten.start_index == 100
        assert cfg.log_level == "debug"

    def test_project_local_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "dummyfiles.yaml").write_text("marker:\n  ignore_prefix: legacy\n")
        cfg = load_config()
        assert cfg.marker.ignore_prefix == "legacy"

    def test_explicit_path_wins_over_local(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "dummyfiles.yaml").write_text("log_level: warn\n")
        explicit = tmp_path / "explicit.yaml"
        explicit.write_text("log_level: error\n")
        assert load_config(str(explicit)).log_level == "error"

    def test_user_global_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        home = tmp_path / "home"
        (home / ".dummyfiles").mkdir(parents=True)
        (home / ".dummyfiles" / "config.yaml").write_text("flatten:\n  start_index: 7\n")
        with patch.object(Path, "home", return_value=home):
            cfg = load_config()
        assert cfg.flatten.start_index == 7

    def test_empty_file_falls_through(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "dummyfiles.yaml").write_text("")
        with patch.object(Path, "home", return_value=tmp_path / "home"):
            assert load_config() == DummyFilesConfig()

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("marker: [unclosed\n")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(str(path))

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("marker:\n  encoding: utf-8\n")
        with pytest.raises(ValueError, match="Invalid config"):
            load_config(str(path))

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="expected a mapping"):
            load_config(str(path))

    def test_missing_explicit_path(self, tmp_path):
        with pytest.raises(ValueError, match="not found"):
            load_config(str(tmp_path / "nope.yaml"))

    @pytest.mark.parametrize(
        "text",
        [
            "verbose: true\n",
            "marker:\n  encodng: latin-1\n",
            "flatten:\n  base_name: moved\n",
        ],
    )
    def test_unknown_keys_rejected(self, tmp_path, text):
        """A misspelt key is an error, not a silently ignored setting."""
        path = tmp_path / "typo.yaml"
        path.write_text(text)
        with pytest.raises(ValueError, match="Invalid config"):
            load_config(str(path))

    def test_candidate_paths_order(self, tmp_path):
        with patch.object(Path, "home", return_value=tmp_path / "home"):
            assert candidate_paths("x.yaml") == [
                Path("x.yaml"),
                Path("dummyfiles.yaml"),
                tmp_path / "home" / ".dummyfiles" / "config.yaml",
            ]
            assert candidate_paths()[0] == Path("dummyfiles.yaml")

    def test_env_vars_expanded(self, tmp_path):
        path = tmp_path / "env.yaml"
        path.write_text("report:\n  html_path: ${DUMMY_REPORT_DIR}/r.html\n")
        with patch.dict(os.environ, {"DUMMY_REPORT_DIR": "/reports"}):
            cfg = load_config(str(path))
        assert cfg.report.html_path == "/reports/r.html"

    def test_default_template_loads(self, tmp_path):
        path = tmp_path / "dummyfiles.yaml"
        path.write_text(DEFAULT_CONFIG_TEMPLATE)
        cfg = load_config(str(path))
        assert cfg.marker.encoding == "latin-1"
        assert cfg.flatten.basename == "dummy"
        assert cfg.log_level == "info"


# ── _expand_env_vars ─────────────────────────────────────────────────


class TestExpandEnvVars:
    def test_nested(self):
        with patch.dict(os.environ, {"X": "1"}):
            assert _expand_env_vars({"a": ["${X}", {"b": "${X}y"}], "c": 3}) == {
                "a": ["1", {"b": "1y"}],
                "c": 3,
            }

    def test_missing_var_is_empty(self):
        with patch.dict(os.environ, {}, clear=True):
            assert _expand_env_vars("${NOPE}/x") == "/x"
