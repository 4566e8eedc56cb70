"""Common interface of the road network generation strategies."""
from typing import Dict, Protocol, Set, Type

from roadgrid.citygen.dataclass import SegmentKind
from roadgrid.citygen.road.connection_road_generator import \
    ConnectionRoadGenerator
from roadgrid.citygen.road.generation_context import GenerationContext
from roadgrid.citygen.road.road_generator import GridRoadGenerator
from roadgrid.citygen.road.segment_placer import SegmentPlacer


class NetworkGenerator(Protocol):
    """A strategy that grows a road network into a generation context."""

    name: str

    def required_kinds(self) -> Set[SegmentKind]:
        """Segment kinds the strategy may place."""
        ...

    def generate(self, context: GenerationContext) -> None:
        """Grow a complete network into a fresh context."""
        ...


GENERATORS: Dict[str, Type] = {
    GridRoadGenerator.name: GridRoadGenerator,
    ConnectionRoadGenerator.name: ConnectionRoadGenerator,
}


def create_road_generator(config, strategy: str = None, max_segments: int = None,
                          segment_placer: SegmentPlacer = None) -> NetworkGenerator:
    """Create the road generator selected by name or by `citygen.road.strategy`.

    Args:
        config: Configuration with road settings.
        strategy: Strategy name, overrides the config.
        max_segments: Maximum number of segments to place, overrides the config.
        segment_placer: Placer shared with the rest of the run.

    Returns:
        The road generator.

    Raises:
        ValueError: If the strategy name is unknown.
    """
    name = strategy or config.get('citygen.road.strategy', GridRoadGenerator.name)
    if name not in GENERATORS:
        raise ValueError(f'Unknown road generation strategy: {name}')
    return GENERATORS[name](config, max_segments=max_segments, segment_placer=segment_placer)
