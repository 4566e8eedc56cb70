from roadgrid.citygen.dataclass import (Direction, GridCell, Point, Segment,
                                        SegmentKind, TreeCandidate)
from roadgrid.citygen.element import TreeCandidateCollector, TreeResolver


def _segment(cell, direction=Direction.FORWARD):
    return Segment(cell, SegmentKind.STRAIGHT, direction, Point(cell.x * 10.0, 0.0, cell.y * 10.0), 'road')


def test_collects_both_sides_left_first(config, context):
    config['citygen.element.tree_density'] = 1.0
    config['citygen.element.tree_jitter'] = 0.0
    collector = TreeCandidateCollector(config)

    candidates = collector.collect(context, _segment(GridCell(0, 0)))

    assert [c.position for c in candidates] == [Point(-5.0, 0.0, 0.0), Point(5.0, 0.0, 0.0)]
    assert context.tree_candidates == candidates
    assert context.stats.tree_candidates == 2


def test_side_offset_follows_travel_direction(config, context):
    config['citygen.element.tree_density'] = 1.0
    config['citygen.element.tree_jitter'] = 0.0
    collector = TreeCandidateCollector(config)

    candidates = collector.collect(context, _segment(GridCell(1, 0), Direction.RIGHT))

    # right of travel along +x is -z
    assert [c.position for c in candidates] == [Point(10.0, 0.0, 5.0), Point(10.0, 0.0, -5.0)]


def test_jitter_stays_within_bounds(config, context):
    config['citygen.element.tree_density'] = 1.0
    config['citygen.element.tree_jitter'] = 1.5
    collector = TreeCandidateCollector(config)

    for y in range(20):
        collector.collect(context, _segment(GridCell(0, y)))

    for candidate in context.tree_candidates:
        base_z = candidate.segment_cell.y * 10.0
        assert 3.5 <= abs(candidate.position.x) <= 6.5
        assert abs(candidate.position.z - base_z) <= 1.5
        assert candidate.position.y == 0.0


def test_density_draw_per_side(config, context, sequence_random):
    config['citygen.element.tree_density'] = 0.5
    config['citygen.element.tree_jitter'] = 0.0
    collector = TreeCandidateCollector(config)
    context.rng = sequence_random([0.7, 0.2, 0.5, 0.5])

    candidates = collector.collect(context, _segment(GridCell(0, 0)))

    assert [c.position.x for c in candidates] == [5.0]


def test_collection_disabled_without_prefab_or_density(config, context):
    config['citygen.element.tree_prefab'] = ''
    assert not TreeCandidateCollector(config).enabled
    assert TreeCandidateCollector(config).collect(context, _segment(GridCell(0, 0))) == []

    config['citygen.element.tree_prefab'] = 'BP_Tree'
    config['citygen.element.tree_density'] = 0.0
    assert not TreeCandidateCollector(config).enabled
    assert context.stats.tree_candidates == 0


def test_first_candidate_wins_a_tree_cell(config, context):
    context.occupancy_map.place(_segment(GridCell(0, 0)))
    context.tree_candidates = [
        TreeCandidate(Point(21.0, 0.0, 0.0), GridCell(0, 0)),
        TreeCandidate(Point(24.0, 0.0, 1.0), GridCell(0, 0)),
    ]

    trees = TreeResolver(config).resolve(context)

    assert [t.position for t in trees] == [Point(21.0, 0.0, 0.0)]
    assert trees[0].tree_cell == GridCell(2, 0)
    assert trees[0].prefab == 'BP_Tree'
    assert 0.0 <= trees[0].rotation <= 360.0
    assert context.stats.trees_accepted == 1
    assert context.stats.trees_rejected == 1


def test_candidate_on_road_is_rejected(config, context):
    context.occupancy_map.place(_segment(GridCell(0, 0)))
    context.tree_candidates = [TreeCandidate(Point(3.0, 0.0, 2.0), GridCell(0, 0))]

    assert TreeResolver(config).resolve(context) == []
    assert context.stats.trees_rejected == 1


def test_tree_cell_matching_an_occupied_road_key_is_rejected(config, context):
    config['citygen.element.tree_cell_size'] = 1.0
    context.occupancy_map.place(_segment(GridCell(3, 0)))
    context.tree_candidates = [
        TreeCandidate(Point(3.0, 0.0, 0.0), GridCell(3, 0)),
        TreeCandidate(Point(4.0, 0.0, 0.0), GridCell(3, 0)),
    ]

    trees = TreeResolver(config).resolve(context)

    assert [t.tree_cell for t in trees] == [GridCell(4, 0)]


def test_road_cell_is_checked_at_road_scale(config, context):
    config['citygen.element.tree_cell_size'] = 2.0
    context.occupancy_map.place(_segment(GridCell(0, 0)))
    context.tree_candidates = [TreeCandidate(Point(4.0, 0.0, 0.0), GridCell(0, 0))]

    assert TreeResolver(config).resolve(context) == []
