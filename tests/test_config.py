import pytest

from quant_autodiff.aad import AADConfig, Graph, get_config, set_config


@pytest.fixture
def restore_config():
    prev = get_config()
    yield
    set_config(prev)


def test_defaults():
    config = AADConfig()
    assert config.check_finite is False
    assert config.skip_zero_adjoints is False


def test_set_config_applies_to_new_graphs(restore_config):
    custom = AADConfig(check_finite=True)
    previous = set_config(custom)
    assert isinstance(previous, AADConfig)
    assert get_config() is custom
    assert Graph().config is custom
    explicit = AADConfig()
    assert Graph(explicit).config is explicit


def test_set_config_type_checked():
    with pytest.raises(TypeError):
        set_config({"check_finite": True})


def test_from_dict_rejects_non_boolean_values():
    with pytest.raises(ValueError):
        AADConfig.from_dict({"skip_zero_adjoints": "false"})
    with pytest.raises(ValueError):
        AADConfig.from_dict({"check_finite": 1})


def test_from_yaml_rejects_quoted_booleans(tmp_path):
    path = tmp_path / "quoted.yaml"
    path.write_text("aad:\n  skip_zero_adjoints: \"false\"\n")
    with pytest.raises(ValueError):
        AADConfig.from_yaml(path)


def test_from_dict_rejects_unknown_keys():
    assert AADConfig.from_dict({"check_finite": True}) == AADConfig(check_finite=True)
    with pytest.raises(ValueError):
        AADConfig.from_dict({"tolerance": 1e-8})


def test_from_yaml_with_section(tmp_path):
    path = tmp_path / "aad.yaml"
    path.write_text("aad:\n  check_finite: true\n  skip_zero_adjoints: true\n")
    assert AADConfig.from_yaml(path) == AADConfig(check_finite=True, skip_zero_adjoints=True)


def test_from_yaml_top_level_and_empty(tmp_path):
    path = tmp_path / "flat.yaml"
    path.write_text("check_finite: yes\n")
    assert AADConfig.from_yaml(path).check_finite is True
    empty = tmp_path / "empty.yaml"
    empty.write_text("")
    assert AADConfig.from_yaml(empty) == AADConfig()


def test_from_yaml_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        AADConfig.from_yaml(tmp_path / "missing.yaml")


def test_from_yaml_rejects_non_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        AADConfig.from_yaml(path)


def test_with_overrides():
    config = AADConfig().with_overrides(check_finite=True)
    assert config.check_finite is True
    assert config.skip_zero_adjoints is False
