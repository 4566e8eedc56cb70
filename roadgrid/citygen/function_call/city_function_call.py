"""City generation function call module for handling generation operations.

This module provides a high-level interface for generating a road network with its
derived content, exporting the result, and rendering a preview.
"""
from roadgrid.citygen.city.city_generator import CityGenerator
from roadgrid.citygen.dataclass import RoadNetwork
from roadgrid.citygen.render.visualization import render_network
from roadgrid.config import Config
from roadgrid.utils.data_exporter import DataExporter
from roadgrid.utils.logger import Logger


class CityFunctionCall:
    """Function call interface for generation operations."""

    def __init__(self, config: Config, seed: int = None, num_segments: int = None, strategy: str = None,
                 generate_building: bool = None, generate_passenger: bool = None):
        """Initialize the function call interface with configuration.

        Args:
            config: Configuration object with generation parameters.
            seed: Seed for the random number generator.
            num_segments: Maximum number of road segments to place.
            strategy: Name of the road generation strategy.
            generate_building: Whether to plan buildings.
            generate_passenger: Whether to plan passengers.
        """
        self.config = config
        self.city_generator = CityGenerator(self.config, seed, num_segments, strategy,
                                            generate_building, generate_passenger)
        self.network: RoadNetwork = None

        self.logger = Logger.get_logger('CityFunctionCall')

    def generate_city(self) -> RoadNetwork:
        """Generate the road network with trees, terrain, buildings and passengers."""
        self.network = self.city_generator.generate()
        stats = self.network.stats
        self.logger.info(
            f'Generated {stats.placed} of {stats.requested} road segments, '
            f'{len(self.network.trees)} trees'
        )
        return self.network

    def _require_network(self) -> RoadNetwork:
        if self.network is None:
            raise RuntimeError('No network generated yet, call generate_city() first')
        return self.network

    def export_city(self, output_dir: str = None):
        """Export the generated network to JSON files.

        Args:
            output_dir: Directory path where the data will be exported.
        """
        if output_dir is None:
            output_dir = self.config['citygen.output_dir']
        exporter = DataExporter(self._require_network())
        exporter.export_to_json(output_dir)

    def render_city(self, file_path: str, pixels_per_unit: float = 4.0) -> bool:
        """Render a top-down preview of the generated network.

        Args:
            file_path: Path to the image file to write.
            pixels_per_unit: Image pixels per world unit.

        Returns:
            True if an image was written.
        """
        return render_network(self._require_network(), file_path,
                              float(self.config['citygen.road.cell_size']), pixels_per_unit)
