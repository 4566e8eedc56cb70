"""Module for data classes defining the data structures of road network generation.

World space is three dimensional with y pointing up; the road network lives on the
ground plane spanned by x and z. Grid cells index that plane, so a cell (x, y) sits
at world position (x * cell_size, 0, y * cell_size).
"""
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


@dataclass(frozen=True)
class Point:
    """A point in world space."""
    x: float
    y: float = 0.0
    z: float = 0.0

    def __hash__(self):
        """Return the hash value of the point."""
        return hash((self.x, self.y, self.z))

    def __add__(self, other: 'Point') -> 'Point':
        """Component-wise addition."""
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def planar_distance(self, other: 'Point') -> float:
        """Distance to another point on the ground plane."""
        return math.hypot(self.x - other.x, self.z - other.z)

    def to_dict(self):
        """Convert the point to dictionary representation."""
        return {
            'x': self.x,
            'y': self.y,
            'z': self.z
        }


class Direction(Enum):
    """Cardinal direction on the ground plane, stored as a (dx, dz) unit step."""
    FORWARD = (0, 1)
    BACK = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        """Step along the world x axis."""
        return self.value[0]

    @property
    def dz(self) -> int:
        """Step along the world z axis."""
        return self.value[1]

    def reverse(self) -> 'Direction':
        """Return the opposite direction."""
        return Direction((-self.dx, -self.dz))

    def turn_left(self) -> 'Direction':
        """Return the direction after a quarter turn counter-clockwise seen from above."""
        return Direction((-self.dz, self.dx))

    def turn_right(self) -> 'Direction':
        """Return the direction after a quarter turn clockwise seen from above."""
        return Direction((self.dz, -self.dx))

    @property
    def yaw(self) -> float:
        """Heading in degrees, 0 along +z and 90 along +x."""
        return math.degrees(math.atan2(self.dx, self.dz)) % 360


class SegmentKind(Enum):
    """Category of a placed road segment."""
    STRAIGHT = 'straight'
    INTERSECTION = 'intersection'


@dataclass(frozen=True)
class GridCell:
    """An integer cell of the generation lattice."""
    x: int
    y: int

    def __hash__(self):
        """Return the hash value of the cell."""
        return hash((self.x, self.y))

    def neighbor(self, direction: Direction) -> 'GridCell':
        """Return the adjacent cell one step in the given direction."""
        return GridCell(self.x + direction.dx, self.y + direction.dz)

    def to_dict(self):
        """Convert the cell to dictionary representation."""
        return {
            'x': self.x,
            'y': self.y
        }


@dataclass(frozen=True)
class FrontierEntry:
    """A cell waiting for placement, reached by moving in `incoming` direction.

    `source` is the cell the entry was enqueued from, None for the seed entry.
    """
    target: GridCell
    incoming: Direction
    source: Optional[GridCell] = None


@dataclass(frozen=True)
class Segment:
    """A placed road segment, doubling as the placement request for the content placer."""
    cell: GridCell
    kind: SegmentKind
    direction: Direction
    position: Point
    prefab: str
    rotation: float = field(init=False)

    def __post_init__(self):
        """Derive the world rotation from the travel direction."""
        object.__setattr__(self, 'rotation', self.direction.yaw)

    def to_dict(self):
        """Convert the segment to dictionary representation."""
        return {
            'cell': self.cell.to_dict(),
            'kind': self.kind.value,
            'direction': self.direction.name.lower(),
            'position': self.position.to_dict(),
            'rotation': self.rotation,
            'prefab': self.prefab
        }


@dataclass(frozen=True)
class TreeCandidate:
    """A provisional roadside tree position produced while placing a segment."""
    position: Point
    segment_cell: GridCell


@dataclass(frozen=True)
class Tree:
    """An accepted tree placement request."""
    position: Point
    rotation: float
    prefab: str
    tree_cell: GridCell

    def to_dict(self):
        """Convert the tree to dictionary representation."""
        return {
            'position': self.position.to_dict(),
            'rotation': self.rotation,
            'prefab': self.prefab,
            'tree_cell': self.tree_cell.to_dict()
        }


@dataclass(frozen=True)
class Footprint:
    """Axis-aligned, padded rectangle on the ground plane covering all generated content."""
    min_x: float
    max_x: float
    min_z: float
    max_z: float

    @property
    def width(self) -> float:
        """Extent along x."""
        return self.max_x - self.min_x

    @property
    def depth(self) -> float:
        """Extent along z."""
        return self.max_z - self.min_z

    @property
    def center(self) -> Point:
        """Center of the rectangle on the ground plane."""
        return Point((self.min_x + self.max_x) / 2, 0.0, (self.min_z + self.max_z) / 2)

    def contains(self, point: Point) -> bool:
        """Check if a point lies strictly inside the rectangle."""
        return self.min_x < point.x < self.max_x and self.min_z < point.z < self.max_z

    def to_dict(self):
        """Convert the footprint to dictionary representation."""
        return {
            'min_x': self.min_x,
            'max_x': self.max_x,
            'min_z': self.min_z,
            'max_z': self.max_z,
            'center': self.center.to_dict(),
            'width': self.width,
            'depth': self.depth
        }


@dataclass(frozen=True)
class TerrainPatch:
    """Terrain request sized from a footprint.

    (origin.x, origin.z) is the minimum corner of the patch.
    """
    origin: Point
    width: float
    height: float
    depth: float
    heightmap_resolution: int

    @classmethod
    def from_footprint(cls, footprint: Footprint, height: float, heightmap_resolution: int,
                       elevation: float = 0.0) -> 'TerrainPatch':
        """Create the terrain patch covering a footprint.

        Args:
            footprint: Padded footprint of the generated network.
            height: Vertical size of the terrain volume.
            heightmap_resolution: Heightmap samples per side.
            elevation: World y of the terrain surface.

        Returns:
            The terrain patch.
        """
        return cls(
            origin=Point(footprint.min_x, elevation, footprint.min_z),
            width=footprint.width,
            height=height,
            depth=footprint.depth,
            heightmap_resolution=heightmap_resolution,
        )

    def to_dict(self):
        """Convert the terrain patch to dictionary representation."""
        return {
            'origin': self.origin.to_dict(),
            'size': {'x': self.width, 'y': self.height, 'z': self.depth},
            'heightmap_resolution': self.heightmap_resolution
        }


@dataclass(frozen=True)
class Building:
    """A building placement request next to a road segment."""
    position: Point
    rotation: float
    prefab: str
    segment_cell: GridCell
    scale: float = 1.0

    def to_dict(self):
        """Convert the building to dictionary representation."""
        return {
            'position': self.position.to_dict(),
            'rotation': self.rotation,
            'prefab': self.prefab,
            'segment_cell': self.segment_cell.to_dict(),
            'scale': self.scale
        }


@dataclass(frozen=True)
class Passenger:
    """A passenger placement request at an open intersection connection."""
    position: Point
    rotation: float
    prefab: str
    intersection_cell: GridCell
    direction: Direction
    scale: float = 1.0

    def to_dict(self):
        """Convert the passenger to dictionary representation."""
        return {
            'position': self.position.to_dict(),
            'rotation': self.rotation,
            'prefab': self.prefab,
            'intersection_cell': self.intersection_cell.to_dict(),
            'direction': self.direction.name.lower(),
            'scale': self.scale
        }


@dataclass
class GenerationStats:
    """Diagnostic counters of one generation run."""
    requested: int = 0
    placed: int = 0
    conflicts: int = 0
    stale_entries: int = 0
    tree_candidates: int = 0
    trees_accepted: int = 0
    trees_rejected: int = 0

    @property
    def starved(self) -> bool:
        """True when the frontier ran dry before the size bound was reached."""
        return self.placed < self.requested

    def to_dict(self):
        """Convert the stats to dictionary representation."""
        return {
            'requested': self.requested,
            'placed': self.placed,
            'starved': self.starved,
            'conflicts': self.conflicts,
            'stale_entries': self.stale_entries,
            'tree_candidates': self.tree_candidates,
            'trees_accepted': self.trees_accepted,
            'trees_rejected': self.trees_rejected
        }


@dataclass
class RoadNetwork:
    """Result of a generation run."""
    segments: List[Segment] = field(default_factory=list)
    trees: List[Tree] = field(default_factory=list)
    footprint: Optional[Footprint] = None
    terrain: Optional[TerrainPatch] = None
    open_connections: Dict[GridCell, List[Direction]] = field(default_factory=dict)
    buildings: List[Building] = field(default_factory=list)
    passengers: List[Passenger] = field(default_factory=list)
    stats: GenerationStats = field(default_factory=GenerationStats)

    @property
    def is_empty(self) -> bool:
        """True when nothing was generated."""
        return self.footprint is None

    @property
    def intersections(self) -> List[Segment]:
        """All intersection segments in placement order."""
        return [s for s in self.segments if s.kind == SegmentKind.INTERSECTION]
