"""Network visualization module for rendering a generated network to an image file."""
from typing import Tuple

from PIL import Image, ImageDraw

from roadgrid.citygen.dataclass import Point, RoadNetwork, SegmentKind
from roadgrid.utils.logger import Logger

BACKGROUND_COLOR = '#F0F8FF'
TERRAIN_COLOR = '#C8DDB0'
ROAD_COLORS = {
    SegmentKind.STRAIGHT: '#2E5984',
    SegmentKind.INTERSECTION: '#1E3F66',
}
TREE_COLOR = '#2E8B57'
BUILDING_COLOR = '#B0A090'
PASSENGER_COLOR = '#E67E22'


def render_network(network: RoadNetwork, file_path: str, cell_size: float, pixels_per_unit: float = 4.0,
                   margin: int = 10) -> bool:
    """Draw a top-down preview of a network and save it.

    World +x points right and world +z points up in the image.

    Args:
        network: The generated network.
        file_path: Image path; the format follows the extension.
        cell_size: World units per grid unit.
        pixels_per_unit: Image pixels per world unit.
        margin: Border in pixels around the terrain.

    Returns:
        True if an image was written, False for an empty network.
    """
    logger = Logger.get_logger('Visualization')
    footprint = network.footprint
    if footprint is None:
        logger.warning('Nothing to render, the network is empty')
        return False

    width = int(footprint.width * pixels_per_unit) + 2 * margin
    height = int(footprint.depth * pixels_per_unit) + 2 * margin
    image = Image.new('RGB', (width, height), BACKGROUND_COLOR)
    draw = ImageDraw.Draw(image)

    def to_pixel(point: Point) -> Tuple[float, float]:
        return (
            margin + (point.x - footprint.min_x) * pixels_per_unit,
            height - margin - (point.z - footprint.min_z) * pixels_per_unit,
        )

    draw.rectangle([margin, margin, width - margin, height - margin], fill=TERRAIN_COLOR)

    half = cell_size / 2 * pixels_per_unit
    for segment in network.segments:
        x, y = to_pixel(segment.position)
        # straights are drawn as a strip along their travel direction
        if segment.kind == SegmentKind.STRAIGHT:
            half_x = half if segment.direction.dx else half / 2
            half_y = half if segment.direction.dz else half / 2
        else:
            half_x = half_y = half
        draw.rectangle([x - half_x, y - half_y, x + half_x, y + half_y], fill=ROAD_COLORS[segment.kind])

    def dot(point: Point, radius: float, color: str):
        x, y = to_pixel(point)
        draw.ellipse([x - radius, y - radius, x + radius, y + radius], fill=color)

    for building in network.buildings:
        x, y = to_pixel(building.position)
        size = max(2.0, pixels_per_unit * 2)
        draw.rectangle([x - size, y - size, x + size, y + size], fill=BUILDING_COLOR)
    for tree in network.trees:
        dot(tree.position, max(1.5, pixels_per_unit * 0.75), TREE_COLOR)
    for passenger in network.passengers:
        dot(passenger.position, max(1.5, pixels_per_unit * 0.5), PASSENGER_COLOR)

    image.save(file_path)
    logger.info(f'Saved preview to {file_path}')
    return True
