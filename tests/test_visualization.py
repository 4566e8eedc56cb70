from PIL import Image

from roadgrid.citygen.city.city_generator import CityGenerator
from roadgrid.citygen.dataclass import RoadNetwork
from roadgrid.citygen.function_call import CityFunctionCall
from roadgrid.citygen.render import render_network


def test_render_writes_image_sized_to_footprint(config, tmp_path):
    network = CityGenerator(config, seed=4, num_segments=15).generate()
    path = tmp_path / 'preview.png'

    assert render_network(network, str(path), 10.0, pixels_per_unit=2.0, margin=5)

    with Image.open(path) as image:
        assert image.size == (int(network.footprint.width * 2.0) + 10, int(network.footprint.depth * 2.0) + 10)


def test_render_skips_empty_network(tmp_path):
    path = tmp_path / 'empty.png'

    assert not render_network(RoadNetwork(), str(path), 10.0)
    assert not path.exists()


def test_function_call_renders(config, tmp_path):
    function_call = CityFunctionCall(config, seed=4, num_segments=10, generate_passenger=True)
    function_call.generate_city()

    assert function_call.render_city(str(tmp_path / 'city.png'))
    assert (tmp_path / 'city.png').exists()
