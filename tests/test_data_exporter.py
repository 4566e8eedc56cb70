import json

import pytest

from roadgrid.citygen.city.city_generator import CityGenerator
from roadgrid.citygen.dataclass import RoadNetwork
from roadgrid.citygen.function_call import CityFunctionCall
from roadgrid.utils.data_exporter import DataExporter


@pytest.fixture
def network(config):
    return CityGenerator(config, seed=12, num_segments=20, generate_building=True,
                         generate_passenger=True).generate()


def test_export_writes_every_file(network, tmp_path):
    DataExporter(network).export_to_json(str(tmp_path / 'out'))

    for name in ['roads.json', 'trees.json', 'terrain.json', 'buildings.json', 'passengers.json',
                 'progen_world.json']:
        assert (tmp_path / 'out' / name).exists()

    roads = json.loads((tmp_path / 'out' / 'roads.json').read_text())
    assert len(roads['roads']) == len(network.segments)
    assert roads['roads'][0]['cell'] == {'x': 0, 'y': 0}
    assert roads['stats']['placed'] == network.stats.placed


def test_world_nodes_cover_all_content(network, tmp_path):
    world = DataExporter(network).convert_layout_to_world(str(tmp_path))

    nodes = world['nodes']
    expected = len(network.segments) + len(network.trees) + len(network.buildings) + len(network.passengers)
    assert len(nodes) == expected
    assert nodes[0]['id'] == 'GEN_Road_0'
    assert nodes[0]['instance_name'] == 'BP_Road_Straight'
    assert nodes[0]['properties']['orientation'] == {'pitch': 0, 'yaw': 0.0, 'roll': 0}
    assert len({node['id'] for node in nodes}) == len(nodes)
    assert world['terrain'] == network.terrain.to_dict()
    assert json.loads((tmp_path / 'progen_world.json').read_text()) == world


def test_empty_network_exports_without_terrain(tmp_path):
    exporter = DataExporter(RoadNetwork())

    assert exporter.export_terrain_data() == {'footprint': None, 'terrain': None}
    assert exporter.convert_layout_to_world(str(tmp_path)) == {'terrain': None, 'nodes': []}


def test_function_call_requires_generation(config, tmp_path):
    function_call = CityFunctionCall(config, seed=1, num_segments=5)

    with pytest.raises(RuntimeError):
        function_call.export_city(str(tmp_path))

    function_call.generate_city()
    function_call.export_city(str(tmp_path))
    assert (tmp_path / 'roads.json').exists()
