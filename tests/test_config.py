"""
Tests for YAML configuration loading and validation
"""

import pytest
import yaml

from config import ExportConfig, LGGCConfig, create_example_config


class TestDefaults:

    def test_defaults_validate(self):
        config = LGGCConfig()
        assert config.validate() == []
        assert config.builder.max_width == 24
        assert config.sweep.min_width == 3
        assert config.sweep.max_width == 20
        assert config.output.exports == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            LGGCConfig(str(tmp_path / "missing.yaml"))

    def test_save_needs_path(self):
        with pytest.raises(ValueError):
            LGGCConfig().save()


class TestExampleConfig:

    def test_round_trip(self, tmp_path):
        path = tmp_path / "configs" / "example.yaml"
        created = create_example_config(str(path))
        loaded = LGGCConfig(str(path))

        assert loaded.to_dict() == created.to_dict()
        assert loaded.theorem1.parameters[0] == [14, 2, 3, 1]
        assert loaded.theorem1.widths == [13]
        assert loaded.output.exports[2] == ExportConfig(13, "large_gap_gray_code_13bit.c", "c")
        assert loaded.validate() == []

    def test_summary_lists_tuples(self, tmp_path):
        config = create_example_config(str(tmp_path / "example.yaml"))
        assert "(14, 2, 3, 1)" in config.summary()


class TestValidation:

    def _load(self, tmp_path, data):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump(data))
        return LGGCConfig(str(path))

    def test_partial_file_keeps_defaults(self, tmp_path):
        config = self._load(tmp_path, {'sweep': {'max_width': 10}})
        assert config.sweep.min_width == 3
        assert config.sweep.max_width == 10
        assert config.builder.max_width == 24

    def test_unknown_keys_ignored(self, tmp_path):
        config = self._load(tmp_path, {'builder': {'max_width': 16, 'colour': 'blue'}})
        assert config.builder.max_width == 16

    def test_bad_theorem1_tuple(self, tmp_path):
        config = self._load(tmp_path, {'theorem1': {'parameters': [[14, 2, 2, 2], [3, 1]]}})
        errors = config.validate()
        assert len(errors) == 2
        assert "odd" in errors[0]
        assert "four integers" in errors[1]

    def test_tuple_too_wide(self, tmp_path):
        config = self._load(tmp_path, {'builder': {'max_width': 12},
                                       'sweep': {'max_width': 12},
                                       'theorem1': {'parameters': [[8, 8, 129, 127]]}})
        assert any("width 16 > 12" in e for e in config.validate())

    def test_bad_sweep(self, tmp_path):
        config = self._load(tmp_path, {'sweep': {'min_width': 9, 'max_width': 4}})
        assert any("Sweep range" in e for e in config.validate())

    def test_bad_formats_and_level(self, tmp_path):
        config = self._load(tmp_path, {
            'output': {'show_format': 'json',
                       'exports': [{'width': 5, 'filename': 'a.txt', 'format': 'xml'}]},
            'logging': {'level': 'LOUD'},
        })
        errors = config.validate()
        assert len(errors) == 3

    def test_limits(self, tmp_path):
        config = self._load(tmp_path, {'builder': {'max_width': 40, 'search_max_width': 7},
                                       'sweep': {'max_width': 10}})
        errors = config.validate()
        assert any("builder.max_width" in e for e in errors)
        assert any("builder.search_max_width" in e for e in errors)
