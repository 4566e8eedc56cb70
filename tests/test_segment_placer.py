import pytest

from roadgrid.citygen.dataclass import Direction, GridCell, Point, SegmentKind
from roadgrid.citygen.road import MissingPrefabError, SegmentPlacer


def test_place_positions_segment_on_the_grid(config, context):
    placer = SegmentPlacer(config)

    segment = placer.place(context, GridCell(-2, 3), SegmentKind.INTERSECTION, Direction.RIGHT)

    assert segment.position == Point(-20.0, 0.0, 30.0)
    assert segment.rotation == 90.0
    assert segment.prefab == 'BP_Road_Cross'
    assert context.stats.placed == 1
    assert context.occupancy_map.get(GridCell(-2, 3)) is segment


def test_place_on_occupied_cell_counts_conflict(config, context):
    placer = SegmentPlacer(config)
    first = placer.place(context, GridCell(0, 0), SegmentKind.STRAIGHT, Direction.FORWARD)

    assert placer.place(context, GridCell(0, 0), SegmentKind.INTERSECTION, Direction.LEFT) is None

    assert context.stats.conflicts == 1
    assert context.stats.placed == 1
    assert context.occupancy_map.get(GridCell(0, 0)) is first


def test_place_hands_segment_to_tree_collector(config, context):
    config['citygen.element.tree_density'] = 1.0
    placer = SegmentPlacer(config)

    placer.place(context, GridCell(0, 0), SegmentKind.STRAIGHT, Direction.FORWARD)

    assert context.stats.tree_candidates == 2
    assert [c.segment_cell for c in context.tree_candidates] == [GridCell(0, 0), GridCell(0, 0)]


def test_validate_names_missing_kind(config):
    config['citygen.road.prefabs.straight'] = ''
    placer = SegmentPlacer(config)

    placer.validate({SegmentKind.INTERSECTION})
    with pytest.raises(MissingPrefabError, match='citygen.road.prefabs.straight'):
        placer.validate({SegmentKind.STRAIGHT, SegmentKind.INTERSECTION})
