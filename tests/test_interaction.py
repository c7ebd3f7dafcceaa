from clusterboard.components.adjacency import Adjacency
from clusterboard.events.bus import (
    EVENT_BOARD_CHANGED,
    EVENT_INPUT_IGNORED,
    EVENT_KIND_SELECTED,
    EVENT_REFILL_COMPLETED,
    EVENT_REGION_CLEARED,
)
from clusterboard.systems.board_ops import get_board, get_region_map, iter_tiles
from clusterboard.systems.interaction import InteractionSystem
from clusterboard.systems.region_finder import RegionFinderSystem, find_regions
from tests.helpers import (
    RED,
    build_world_with_kinds,
    kinds_grid,
    selected_positions,
    tile_snapshot,
)


def _scan(world):
    get_region_map(world).replace(find_regions(world))


def _assert_clean(world):
    board = get_board(world)
    for _, tile, marks in iter_tiles(world, board):
        if tile.is_empty:
            continue
        assert not marks.visited
        assert not marks.selected


def test_lowercase_key_clears_whole_single_kind_board():
    bus, world, _ = build_world_with_kinds(["AAA", "AAA", "AAA"], palette=[('A', RED)])
    _scan(world)
    assert len(selected_positions(world)) == 9
    interaction = InteractionSystem(world, bus)
    assert interaction.process('a') is True
    region_map = get_region_map(world)
    assert region_map.regions == {}
    assert not region_map.scanned
    assert kinds_grid(world) == ["AAA", "AAA", "AAA"]
    _assert_clean(world)


def test_unknown_key_is_a_no_op():
    bus, world, _ = build_world_with_kinds(["AAB", "CBB", "CCA"])
    _scan(world)
    before = tile_snapshot(world)
    regions_before = dict(get_region_map(world).regions)
    ignored = []
    bus.subscribe(EVENT_INPUT_IGNORED, lambda sender, **payload: ignored.append(payload['reason']))
    interaction = InteractionSystem(world, bus)
    # 'A' only forms a pair, 'Z' is not a kind at all.
    assert interaction.process('a') is False
    assert interaction.process('Z') is False
    assert tile_snapshot(world) == before
    assert get_region_map(world).regions == regions_before
    assert ignored == ['no_region', 'no_region']


def test_malformed_keys_are_ignored():
    bus, world, _ = build_world_with_kinds(["AAA"], palette=[('A', RED)])
    _scan(world)
    before = tile_snapshot(world)
    interaction = InteractionSystem(world, bus)
    assert interaction.process('') is False
    assert interaction.process('aa') is False
    assert interaction.process(None) is False
    assert tile_snapshot(world) == before


def test_key_before_any_scan_does_nothing():
    bus, world, _ = build_world_with_kinds(["AAA"], palette=[('A', RED)])
    before = tile_snapshot(world)
    assert InteractionSystem(world, bus).process('A') is False
    assert tile_snapshot(world) == before


def test_interaction_only_refills_selected_region_and_resets_board():
    bus, world, _ = build_world_with_kinds(["AAAB", "CCBB", "CAAB"], palette=[('A', RED), ('B', (1, 2, 3)), ('C', (4, 5, 6))])
    _scan(world)
    regions = get_region_map(world).regions
    cleared = set(regions['A'])
    assert cleared == {(0, 0), (0, 1), (0, 2)}
    before = tile_snapshot(world)
    InteractionSystem(world, bus).process('a')
    after = tile_snapshot(world)
    for pos, (kind, highlight, visited, selected) in after.items():
        assert not visited and not selected
        if pos not in cleared:
            assert (kind, highlight) == before[pos][:2]
    assert get_region_map(world).regions == {}


def test_refill_assigns_palette_kind_and_matching_highlight():
    palette = [('A', RED), ('B', (1, 2, 3))]
    bus, world, _ = build_world_with_kinds(["AAAA", "BBAB"], palette=palette)
    _scan(world)
    InteractionSystem(world, bus).process('A')
    board = get_board(world)
    colors = dict(palette)
    for _, tile, _ in iter_tiles(world, board):
        assert tile.kind in colors
        assert tile.highlight == colors[tile.kind]


def test_interaction_keeps_adjacency_untouched():
    bus, world, _ = build_world_with_kinds(["AAA.", "A.AA", "AAA"], palette=[('A', RED)])
    board = get_board(world)
    flags_before = {pos: world.component_for_entity(ent, Adjacency) for pos, ent in board.cells.items()}
    _scan(world)
    InteractionSystem(world, bus).process('a')
    flags_after = {pos: world.component_for_entity(ent, Adjacency) for pos, ent in board.cells.items()}
    assert flags_after == flags_before


def test_interaction_events_describe_the_change():
    bus, world, _ = build_world_with_kinds(["AAA", "BBA"], palette=[('A', RED), ('B', (1, 2, 3))])
    _scan(world)
    events = []
    bus.subscribe(EVENT_REGION_CLEARED, lambda sender, **p: events.append(('cleared', p['kind'], p['positions'])))
    bus.subscribe(EVENT_REFILL_COMPLETED, lambda sender, **p: events.append(('refill', len(p['new_tiles']))))
    bus.subscribe(EVENT_BOARD_CHANGED, lambda sender, **p: events.append(('changed', p['reason'])))
    InteractionSystem(world, bus).process('A')
    assert events == [
        ('cleared', 'A', [(0, 0), (0, 1), (0, 2), (1, 2)]),
        ('refill', 4),
        ('changed', 'interaction'),
    ]


def test_kind_selected_event_drives_clear_and_rescan():
    bus, world, _ = build_world_with_kinds(["AAA", "AAA", "AAA"], palette=[('A', RED)])
    finder = RegionFinderSystem(world, bus)
    InteractionSystem(world, bus)
    finder.scan()
    cleared = []
    bus.subscribe(EVENT_REGION_CLEARED, lambda sender, **p: cleared.append(p['kind']))
    bus.emit(EVENT_KIND_SELECTED, key='a')
    assert cleared == ['A']
    # The finder rescans straight after the board change.
    region_map = get_region_map(world)
    assert region_map.scanned
    assert len(region_map.regions['A']) == 9
    assert len(selected_positions(world)) == 9
