import pytest

from roadgrid.config import Config


def test_default_config_values(config):
    assert config['citygen.road.strategy'] == 'grid'
    assert config['citygen.road.cell_size'] == 10.0
    assert config['citygen.road.grid_spacing'] == 10
    assert config['citygen.element.tree_prefab'] == 'BP_Tree'


def test_user_config_is_merged_over_defaults(tmp_path):
    user_config = tmp_path / 'user.yaml'
    user_config.write_text('citygen:\n  road:\n    branch_chance: 0.9\n')

    config = Config(str(user_config))

    assert config['citygen.road.branch_chance'] == 0.9
    assert config['citygen.road.intersection_chance'] == 0.3


def test_missing_user_config_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config(str(tmp_path / 'missing.yaml'))


def test_unknown_key_raises_without_default(config):
    with pytest.raises(ValueError):
        config['citygen.road.no_such_key']
    assert config.get('citygen.road.no_such_key', 7) == 7


def test_set_overrides_and_creates_sections(config):
    config['citygen.road.segment_count_limit'] = 3
    config.set('custom.section.value', 'x')

    assert config['citygen.road.segment_count_limit'] == 3
    assert config['custom.section.value'] == 'x'


def test_configs_do_not_share_state():
    first = Config()
    first['citygen.road.segment_count_limit'] = 1

    assert Config()['citygen.road.segment_count_limit'] == 30
