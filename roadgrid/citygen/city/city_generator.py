"""City generator module for generating road networks with trees, terrain, buildings and passengers."""
from enum import Enum, auto

from roadgrid.citygen.building.building_generator import BuildingPlacer
from roadgrid.citygen.dataclass import RoadNetwork
from roadgrid.citygen.element.tree_resolver import TreeResolver
from roadgrid.citygen.passenger.passenger_generator import PassengerPlacer
from roadgrid.citygen.road.generation_context import GenerationContext
from roadgrid.citygen.road.network_generator import create_road_generator
from roadgrid.citygen.road.segment_placer import SegmentPlacer
from roadgrid.citygen.terrain.footprint import FootprintCalculator
from roadgrid.utils.logger import Logger


class GenerationState(Enum):
    """Enum to track the generation state."""
    GENERATING_ROADS = auto()
    RESOLVING_TREES = auto()
    MEASURING_FOOTPRINT = auto()
    PLACING_BUILDINGS = auto()
    PLACING_PASSENGERS = auto()
    COMPLETED = auto()


class CityGenerator:
    """Manages the complete generation run including roads, trees, terrain, buildings and passengers."""

    def __init__(self, config, seed: int = None, num_segments: int = None, strategy: str = None,
                 generate_building: bool = None, generate_passenger: bool = None):
        """Initialize the city generator with configuration.

        Args:
            config: Configuration for the generation.
            seed: Seed for the random number generator.
            num_segments: Maximum number of road segments to place.
            strategy: Name of the road generation strategy.
            generate_building: Whether to plan buildings.
            generate_passenger: Whether to plan passengers.
        """
        self.config = config
        self.seed = self.config['roadgrid.seed'] if seed is None else seed

        self.segment_placer = SegmentPlacer(self.config)
        self.road_generator = create_road_generator(self.config, strategy, num_segments, self.segment_placer)
        self.tree_resolver = TreeResolver(self.config)
        self.footprint_calculator = FootprintCalculator(self.config)
        self.building_placer = BuildingPlacer(self.config)
        self.passenger_placer = PassengerPlacer(self.config)

        self.generate_building = self.config['citygen.building.generation'] if generate_building is None else generate_building
        self.generate_passenger = self.config['citygen.passenger.generation'] if generate_passenger is None else generate_passenger

        self.logger = Logger.get_logger('CityGenerator')
        self.reset()

    def reset(self, seed: int = None):
        """Discard all state of the previous run and reseed.

        Args:
            seed: Seed for this run, defaults to the generator seed.
        """
        self.context = GenerationContext.seeded(self.seed if seed is None else seed)
        self.network = RoadNetwork(stats=self.context.stats)
        self.generation_state = GenerationState.GENERATING_ROADS

    def generate(self, seed: int = None) -> RoadNetwork:
        """Run a complete generation.

        Args:
            seed: Seed for this run, defaults to the generator seed.

        Returns:
            The generated network.

        Raises:
            MissingPrefabError: If a segment kind that may be placed has no prefab.
        """
        self.reset(seed)
        self.logger.info(
            f'Generating roads with the {self.road_generator.name} strategy '
            f'(seed {self.seed if seed is None else seed})'
        )
        while not self.is_generation_complete():
            self.generate_step()
        return self.network

    def generate_step(self) -> bool:
        """Advance the run by one stage.

        Returns:
            bool: True if generation is complete.
        """
        if self.generation_state == GenerationState.GENERATING_ROADS:
            self.road_generator.generate(self.context)
            self.network.segments = self.context.placements
            self.network.open_connections = self.context.open_connections()
            self.generation_state = GenerationState.RESOLVING_TREES
            return False

        elif self.generation_state == GenerationState.RESOLVING_TREES:
            self.network.trees = self.tree_resolver.resolve(self.context)
            self.logger.info(
                f'Trees accepted: {self.context.stats.trees_accepted}, '
                f'rejected: {self.context.stats.trees_rejected}'
            )
            self.generation_state = GenerationState.MEASURING_FOOTPRINT
            return False

        elif self.generation_state == GenerationState.MEASURING_FOOTPRINT:
            self.network.footprint = self.footprint_calculator.calculate(
                self.context.occupancy_map.cells, self.network.trees
            )
            self.network.terrain = self.footprint_calculator.terrain_patch(self.network.footprint)
            if self.network.footprint is None:
                self.logger.info('Nothing generated, no terrain patch')
            else:
                self.logger.info(
                    f'Terrain patch {self.network.footprint.width:.1f} x {self.network.footprint.depth:.1f}'
                )
            self.generation_state = GenerationState.PLACING_BUILDINGS
            return False

        elif self.generation_state == GenerationState.PLACING_BUILDINGS:
            if self.generate_building:
                self.network.buildings = self.building_placer.place_along_segments(
                    self.network.segments, self.context.occupancy_map, self.context.rng
                )
            self.generation_state = GenerationState.PLACING_PASSENGERS
            return False

        elif self.generation_state == GenerationState.PLACING_PASSENGERS:
            if self.generate_passenger:
                self.network.passengers = self.passenger_placer.place_at_open_connections(
                    self.network.open_connections, self.context.occupancy_map
                )
            self.generation_state = GenerationState.COMPLETED
        return True

    def is_generation_complete(self) -> bool:
        """Check if generation is complete.

        Returns:
            bool: True if generation is complete.
        """
        return self.generation_state == GenerationState.COMPLETED

    @property
    def occupancy_map(self):
        """Get the occupancy map of the current run."""
        return self.context.occupancy_map

    @property
    def segments(self):
        """Get all placed segments of the current run."""
        return self.context.placements

    @property
    def stats(self):
        """Get the diagnostic counters of the current run."""
        return self.context.stats
