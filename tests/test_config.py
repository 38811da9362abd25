import pytest
from pydantic import ValidationError

from demokit_inference.config import (
    CONFIDENCE_EXACT,
    CONFIDENCE_GENERATED,
    CONFIDENCE_NORMALIZED,
    CONFIDENCE_PLURAL,
    MAX_ROWS,
    SAMPLE_SIZE,
    TYPE_MATCH_THRESHOLD,
    InferenceSettings,
    load_settings,
)


class TestDefaults:
    def test_constants(self):
        assert (CONFIDENCE_EXACT, CONFIDENCE_PLURAL, CONFIDENCE_NORMALIZED, CONFIDENCE_GENERATED) == (100, 90, 80, 70)
        assert MAX_ROWS == 1000
        assert SAMPLE_SIZE == 100
        assert TYPE_MATCH_THRESHOLD == 0.8

    def test_settings_mirror_constants(self):
        settings = InferenceSettings()
        assert settings.max_rows == MAX_ROWS
        assert settings.confidence_exact == CONFIDENCE_EXACT
        assert "graphql" in settings.skip_path_patterns
        assert settings.skip_methods == ["HEAD", "OPTIONS"]

    def test_confidence_bounds(self):
        with pytest.raises(ValidationError):
            InferenceSettings(confidence_exact=120)


class TestLoadSettings:
    def test_no_file(self):
        assert load_settings(None) == InferenceSettings()

    def test_overrides(self, tmp_path):
        f = tmp_path / "settings.yaml"
        f.write_text("max_rows: 10\nskip_path_patterns:\n  - internal/\n")
        settings = load_settings(f)
        assert settings.max_rows == 10
        assert settings.skip_path_patterns == ["internal/"]
        assert settings.sample_size == SAMPLE_SIZE

    def test_empty_file(self, tmp_path):
        f = tmp_path / "settings.yaml"
        f.write_text("")
        assert load_settings(f) == InferenceSettings()

    def test_not_a_mapping(self, tmp_path):
        f = tmp_path / "settings.yaml"
        f.write_text("- a\n- b\n")
        with pytest.raises(ValueError):
            load_settings(f)
