import pytest

from hullview.geometry import DegeneratePointSetError, Point
from hullview.graham_scan import graham_scan
from hullview.jarvis_march import gift_wrapping, jarvis_march
from hullview.polygon import contains, is_convex

BUILDERS = [graham_scan, jarvis_march]


def _interior(vertex, hull):
    rest = [p for p in hull if p != vertex]
    return len(rest) >= 3 and contains(rest, vertex)


@pytest.mark.parametrize("build", BUILDERS)
def test_square_drops_interior_point(build, square_with_center):
    hull = build(square_with_center)
    assert set(hull) == {(0, 0), (4, 0), (4, 4), (0, 4)}
    assert is_convex(hull)


def test_graham_order_starts_leftmost(square_with_center):
    assert graham_scan(square_with_center) == [(0, 0), (4, 0), (4, 4), (0, 4)]


def test_jarvis_order_starts_lowest():
    points = [(1, 3), (0, 1), (3, 0), (4, 2)]
    assert jarvis_march(points) == [(3, 0), (4, 2), (1, 3), (0, 1)]


@pytest.mark.parametrize("build", BUILDERS)
def test_collinear_points_are_degenerate(build):
    with pytest.raises(DegeneratePointSetError):
        build([(0, 0), (1, 0), (2, 0)])


@pytest.mark.parametrize("build", BUILDERS)
def test_coincident_points_are_degenerate(build):
    with pytest.raises(DegeneratePointSetError):
        build([(1, 1), (1, 1), (1, 1)])


@pytest.mark.parametrize("build", BUILDERS)
@pytest.mark.parametrize("points", [[], [(0, 0)], [(0, 0), (1, 1)]])
def test_fewer_than_three_points_gives_nothing(build, points):
    assert build(points) == []


@pytest.mark.parametrize("build", BUILDERS)
def test_triangle_keeps_all_vertices(build):
    hull = build([(0, 0), (2, 0), (1, 2)])
    assert set(hull) == {(0, 0), (2, 0), (1, 2)}
    assert len(hull) == 3
    assert is_convex(hull)


@pytest.mark.parametrize("build", BUILDERS)
def test_edge_midpoint_is_excluded(build):
    hull = build([(0, 0), (4, 0), (4, 4), (0, 4), (2, 0)])
    assert set(hull) == {(0, 0), (4, 0), (4, 4), (0, 4)}


@pytest.mark.parametrize("build", BUILDERS)
def test_collinear_points_on_every_edge(build):
    points = [(x, y) for x in range(4) for y in range(4)]
    assert set(build(points)) == {(0, 0), (3, 0), (3, 3), (0, 3)}


@pytest.mark.parametrize("build", BUILDERS)
def test_duplicates_do_not_break_the_hull(build):
    points = [(0, 0), (0, 0), (2, 0), (1, 2), (1, 2), (1, 1)]
    assert set(build(points)) == {(0, 0), (2, 0), (1, 2)}


@pytest.mark.parametrize("build", BUILDERS)
def test_input_is_not_modified(build, square_with_center):
    before = list(square_with_center)
    build(square_with_center)
    assert square_with_center == before


@pytest.mark.parametrize("build", BUILDERS)
def test_hull_properties_on_random_sets(build, random_points):
    for n in (3, 5, 10, 40):
        points = random_points(n)
        hull = build(points)
        assert is_convex(hull)
        assert set(hull) <= set(points)
        assert all(contains(hull, p) for p in points)
        assert not any(_interior(v, hull) for v in hull)
        assert len(hull) == len(set(hull))


def test_builders_agree(random_points):
    for n in (4, 8, 25, 60):
        points = random_points(n)
        assert set(graham_scan(points)) == set(jarvis_march(points))


def test_jarvis_terminates_within_point_count(random_points):
    points = random_points(30)
    assert len(gift_wrapping(points)) <= len(points)


def test_builders_accept_points_and_return_points():
    hull = graham_scan([Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 1.0)])
    assert all(isinstance(p, Point) for p in hull)
    assert all(isinstance(p, Point) for p in jarvis_march([(0, 0), (1, 0), (0, 1)]))
