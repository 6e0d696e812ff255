"""Tests for build configuration."""

import pytest

from stylers.build import DEFAULT_PATTERN, BuildParams, BuildParamsBuilder
from stylers.errors import BuildConfigError


class TestBuilder:
    def test_builder_entry_point(self):
        assert isinstance(BuildParams.builder(), BuildParamsBuilder)

    def test_output_path_created_with_parents(self, tmp_path):
        out = tmp_path / "a" / "b" / "out.css"
        builder = BuildParams.builder().with_output_path(out)
        assert builder.output_path == out
        assert out.is_file()

    def test_existing_output_file_kept(self, tmp_path):
        out = tmp_path / "out.css"
        out.write_text("previous")
        BuildParams.builder().with_output_path(out)
        assert out.read_text() == "previous"

    def test_output_path_that_is_a_directory(self, tmp_path):
        with pytest.raises(BuildConfigError):
            BuildParams.builder().with_output_path(tmp_path)

    def test_search_dir_must_exist(self, tmp_path):
        with pytest.raises(BuildConfigError):
            BuildParams.builder().with_search_dir(tmp_path / "nope")

    def test_builder_is_immutable(self, tmp_path):
        base = BuildParams.builder()
        base.with_search_dir(tmp_path)
        assert base.search_dir is None


class TestFinish:
    def test_explicit_values(self, tmp_path):
        params = (
            BuildParams.builder()
            .with_output_path(tmp_path / "out.css")
            .with_search_dir(tmp_path)
            .with_pattern("*.py")
            .finish()
        )
        assert params == BuildParams(
            output_path=tmp_path / "out.css", search_dir=tmp_path, pattern="*.py"
        )

    def test_defaults_relative_to_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "src").mkdir()
        params = BuildParams.builder().finish()
        assert params.output_path.resolve() == (tmp_path / "target" / "stylers_out.css").resolve()
        assert params.output_path.is_file()
        assert params.search_dir.resolve() == (tmp_path / "src").resolve()
        assert params.pattern == DEFAULT_PATTERN

    def test_missing_default_search_dir(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(BuildConfigError):
            BuildParams.builder().finish()
