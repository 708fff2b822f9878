from pathnav.route import Route, RouteStatus


def test_found_route_geojson():
    route = Route(
        status=RouteStatus.FOUND,
        coordinates=((0.0, 0.0), (1.0, 0.0)),
        nodes=("0.0,0.0", "1.0,0.0"),
        cost=1.0,
    )
    assert route
    assert len(route) == 2
    assert route.to_geojson() == {
        "type": "Feature",
        "geometry": {"type": "LineString", "coordinates": [[0.0, 0.0], [1.0, 0.0]]},
        "properties": {"cost": 1.0, "nodes": 2},
    }


def test_single_point_route_is_point():
    route = Route(status=RouteStatus.FOUND, coordinates=((3.0, 4.0),), nodes=("3.0,4.0",), cost=0.0)
    assert route.to_geojson()["geometry"] == {"type": "Point", "coordinates": [3.0, 4.0]}


def test_not_found_results_are_distinct():
    empty = Route.empty_graph()
    unreachable = Route.unreachable("a", "b")
    assert not empty and not unreachable
    assert empty.status is RouteStatus.EMPTY_GRAPH
    assert unreachable.status is RouteStatus.UNREACHABLE
    assert empty != unreachable
    assert empty.to_geojson() is None
