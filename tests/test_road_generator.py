import pytest

from roadgrid.citygen.dataclass import (Direction, FrontierEntry, GridCell,
                                        Point, Segment, SegmentKind)
from roadgrid.citygen.road import (GenerationContext, GridRoadGenerator,
                                   GrowthState, MissingPrefabError,
                                   create_road_generator)
from roadgrid.utils.grid_utils import GridUtils


def test_zero_segments_places_nothing(config, context):
    generator = GridRoadGenerator(config, max_segments=0)

    generator.generate(context)

    assert len(context.occupancy_map) == 0
    assert context.stats.placed == 0
    assert context.state == GrowthState.DRAINED


def test_single_segment_is_straight_start(config, context):
    generator = GridRoadGenerator(config, max_segments=1)

    generator.generate(context)

    assert context.occupancy_map.cells == [GridCell(0, 0)]
    start = context.occupancy_map.get(GridCell(0, 0))
    assert start.kind == SegmentKind.STRAIGHT
    assert start.direction == Direction.FORWARD
    assert start.position == Point(0.0, 0.0, 0.0)
    assert start.prefab == 'BP_Road_Straight'


def test_no_intersections_grows_a_straight_line(config, context):
    config['citygen.road.intersection_chance'] = 0.0
    generator = GridRoadGenerator(config, max_segments=5)

    generator.generate(context)

    assert context.occupancy_map.cells == [GridCell(0, y) for y in range(5)]
    assert all(s.kind == SegmentKind.STRAIGHT for s in context.placements)
    assert all(s.direction == Direction.FORWARD for s in context.placements)
    assert [s.position.z for s in context.placements] == [0.0, 10.0, 20.0, 30.0, 40.0]


def test_guaranteed_continuation_keeps_growing_without_branches(config, context):
    config['citygen.road.grid_spacing'] = 1
    config['citygen.road.intersection_chance'] = 1.0
    config['citygen.road.branch_chance'] = 0.0
    generator = GridRoadGenerator(config, max_segments=10)

    generator.generate(context)

    assert context.occupancy_map.cells == [GridCell(0, y) for y in range(10)]
    assert context.occupancy_map.kind_at(GridCell(0, 0)) == SegmentKind.STRAIGHT
    assert all(context.occupancy_map.kind_at(GridCell(0, y)) == SegmentKind.INTERSECTION for y in range(1, 10))

    open_connections = context.open_connections()
    for y in range(1, 9):
        assert open_connections[GridCell(0, y)] == [Direction.LEFT, Direction.RIGHT]
    # the last intersection still has its forward entry queued
    assert open_connections[GridCell(0, 9)] == [Direction.LEFT, Direction.RIGHT, Direction.FORWARD]


def test_blocked_frontier_stops_early(config, context):
    config['citygen.road.intersection_chance'] = 0.0
    context.occupancy_map.place(
        Segment(GridCell(0, 3), SegmentKind.STRAIGHT, Direction.FORWARD, Point(0.0, 0.0, 30.0), 'road')
    )
    generator = GridRoadGenerator(config, max_segments=10)

    generator.generate(context)

    assert context.stats.placed == 3
    assert context.stats.requested == 10
    assert context.stats.starved
    assert context.state == GrowthState.DRAINED


def test_stale_frontier_entries_are_skipped(config, context):
    config['citygen.road.intersection_chance'] = 0.0
    generator = GridRoadGenerator(config, max_segments=3)

    generator.generate_initial_segment(context)
    context.frontier.enqueue(FrontierEntry(GridCell(0, 1), Direction.FORWARD, GridCell(0, 0)))
    for _ in range(3):
        assert not generator.generate_step(context)

    assert context.stats.stale_entries == 1
    assert context.stats.placed == 3
    assert generator.generate_step(context)


def test_missing_intersection_prefab_fails_before_placing(config, context):
    config['citygen.road.prefabs.intersection'] = ''
    generator = GridRoadGenerator(config, max_segments=30)

    with pytest.raises(MissingPrefabError, match='intersection'):
        generator.generate(context)

    assert len(context.occupancy_map) == 0


def test_missing_intersection_prefab_is_fine_when_never_needed(config, context):
    config['citygen.road.prefabs.intersection'] = ''
    config['citygen.road.intersection_chance'] = 0.0
    generator = GridRoadGenerator(config, max_segments=4)

    generator.generate(context)

    assert context.stats.placed == 4


def test_only_lattice_cells_draw_for_intersections(config, sequence_random):
    generator = GridRoadGenerator(config)
    rng = sequence_random([0.0])

    assert generator.choose_segment_kind(rng, GridCell(0, 5)) == SegmentKind.STRAIGHT
    assert rng.calls == 0
    assert generator.choose_segment_kind(rng, GridCell(10, -20)) == SegmentKind.INTERSECTION
    assert rng.calls == 1


@pytest.mark.parametrize('seed', [0, 1, 7, 42, 2024])
def test_generated_network_invariants(config, seed):
    config['citygen.road.grid_spacing'] = 2
    config['citygen.road.intersection_chance'] = 0.6
    config['citygen.road.branch_chance'] = 0.7
    context = GenerationContext.seeded(seed)
    generator = GridRoadGenerator(config, max_segments=60)

    generator.generate(context)

    cells = context.occupancy_map.cells
    assert 1 <= len(cells) <= 60
    assert len(cells) == len(set(cells)) == context.stats.placed
    for segment in context.placements:
        assert segment.position == GridUtils.cell_to_world(segment.cell, 10.0)
        if segment.kind == SegmentKind.INTERSECTION:
            assert GridUtils.is_lattice_cell(segment.cell, 2)


def test_same_seed_same_network(config):
    first = GenerationContext.seeded(99)
    second = GenerationContext.seeded(99)

    GridRoadGenerator(config).generate(first)
    GridRoadGenerator(config).generate(second)

    assert first.placements == second.placements
    assert first.tree_candidates == second.tree_candidates


def test_create_road_generator_by_name(config):
    assert isinstance(create_road_generator(config), GridRoadGenerator)
    assert create_road_generator(config, 'connection').name == 'connection'
    with pytest.raises(ValueError):
        create_road_generator(config, 'spiral')
