from path_finder.core.position import Position
from path_finder.systems.search.astar import _select_lowest_f
from path_finder.systems.search.heuristic import manhattan
from path_finder.systems.search.node import NodeArena, SearchNode


def test_manhattan_distance():
    assert manhattan(Position(0, 0), Position(0, 0)) == 0
    assert manhattan(Position(7, 0), Position(0, 0)) == 7
    assert manhattan(Position(1, 4), Position(3, 1)) == 5


def test_f_is_derived_from_g_and_h():
    node = SearchNode(Position(0, 0), g=20, h=3)
    assert node.f == 23
    assert node.parent is None


def test_backtrace_follows_parent_indices():
    arena = NodeArena()
    root = arena.add(SearchNode(Position(0, 0), 0, 2))
    mid = arena.add(SearchNode(Position(0, 1), 10, 1, root))
    arena.add(SearchNode(Position(5, 5), 10, 9, root))
    leaf = arena.add(SearchNode(Position(1, 1), 20, 0, mid))

    assert len(arena) == 4
    assert arena.backtrace(leaf) == [(0, 0), (0, 1), (1, 1)]
    assert arena.backtrace(root) == [(0, 0)]


def test_lowest_f_ties_keep_insertion_order():
    arena = NodeArena()
    a, b = Position(0, 1), Position(1, 0)
    open_set = {
        a: arena.add(SearchNode(a, 10, 5)),
        b: arena.add(SearchNode(b, 10, 5)),
    }
    assert _select_lowest_f(open_set, arena) == a

    # replacing an entry keeps its place in the iteration order
    open_set[b] = arena.add(SearchNode(b, 5, 5))
    assert _select_lowest_f(open_set, arena) == b
    open_set[b] = arena.add(SearchNode(b, 10, 5))
    assert _select_lowest_f(open_set, arena) == a


def test_lowest_f_single_entry():
    arena = NodeArena()
    only = Position(3, 3)
    assert _select_lowest_f({only: arena.add(SearchNode(only, 0, 9))}, arena) == only


def test_lowest_f_later_entry_strictly_smaller():
    arena = NodeArena()
    a, b, c = Position(0, 0), Position(0, 1), Position(0, 2)
    open_set = {
        a: arena.add(SearchNode(a, 10, 9)),
        b: arena.add(SearchNode(b, 10, 2)),
        c: arena.add(SearchNode(c, 10, 2)),
    }
    assert _select_lowest_f(open_set, arena) == b
