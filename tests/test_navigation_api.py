# tests/test_navigation_api.py
from fastapi.testclient import TestClient

from app.main import app

client = TestClient(app)


def add(lat, lng):
    return client.post("/navigation/waypoints", json={"lat": lat, "lng": lng})


def test_empty_route():
    response = client.get("/navigation/")
    assert response.status_code == 200

    data = response.json()
    assert data["waypoints"] == []
    assert data["phase"] == "empty"
    assert data["result"] is None
    assert data["display"] is None
    assert data["speed_knots"] == 5.0


def test_map_clicks_build_route():
    add(57.0, 11.0)
    response = add(58.0, 12.0)
    assert response.status_code == 200

    data = response.json()
    assert data["phase"] == "multi"
    assert len(data["waypoints"]) == 2
    assert data["result"]["total_distance_nm"] > 0
    assert data["result"]["heading_deg"] is not None
    assert data["display"]["total_distance_km"] == f"{data['result']['total_distance_km']:.2f}"
    assert data["render"]["markers"][0]["role"] == "start"
    assert len(data["render"]["polyline"]) == 2


def test_map_click_out_of_range_is_rejected():
    response = add(91.0, 11.0)
    assert response.status_code == 422
    assert client.get("/navigation/").json()["waypoints"] == []


def test_single_waypoint_has_no_result():
    data = add(57.0, 11.0).json()
    assert data["phase"] == "single"
    assert data["result"] is None
    assert data["render"]["polyline"] == []


def test_speed_zero_hides_time():
    add(57.0, 11.0)
    add(58.0, 12.0)

    data = client.put("/navigation/speed", json={"speed_knots": 0}).json()
    assert data["speed_knots"] == 0
    assert data["result"]["total_distance_nm"] > 0
    assert data["result"]["estimated_time"] is None
    assert data["display"]["estimated_time"] is None


def test_speed_sets_time():
    add(57.0, 11.0)
    add(58.0, 12.0)

    data = client.put("/navigation/speed", json={"speed_knots": 10}).json()
    assert data["result"]["estimated_time"] == {"hours": 6, "minutes": 49}


def test_remove_waypoint():
    add(57.0, 11.0)
    add(58.0, 12.0)
    add(58.5, 12.5)

    data = client.delete("/navigation/waypoints/1").json()
    assert data["waypoints"] == [{"lat": 57.0, "lng": 11.0}, {"lat": 58.5, "lng": 12.5}]


def test_remove_missing_waypoint_returns_404():
    add(57.0, 11.0)

    response = client.delete("/navigation/waypoints/3")
    assert response.status_code == 404
    assert len(client.get("/navigation/").json()["waypoints"]) == 1


def test_clear_route():
    add(57.0, 11.0)
    add(58.0, 12.0)

    data = client.delete("/navigation/waypoints").json()
    assert data["waypoints"] == []
    assert data["phase"] == "empty"


def test_geolocation_replaces_route():
    add(57.0, 11.0)
    add(58.0, 12.0)

    data = client.post("/navigation/geolocation", json={"lat": 57.7, "lng": 11.9}).json()
    assert data["waypoints"] == [{"lat": 57.7, "lng": 11.9}]
    assert data["result"] is None


def test_manual_pair_appends_two_points():
    add(57.0, 11.0)

    payload = {"lat_a": "57.5", "lng_a": "11.5", "lat_b": "58.0", "lng_b": "12.0"}
    data = client.post("/navigation/manual", json=payload).json()
    assert len(data["waypoints"]) == 3
    assert data["result"]["heading_deg"] is None


def test_manual_pair_with_bad_latitude_is_rejected():
    payload = {"lat_a": "north", "lng_a": "11.5", "lat_b": "58.0", "lng_b": "12.0"}
    response = client.post("/navigation/manual", json=payload)

    assert response.status_code == 422
    assert "lat_a" in response.json()["detail"]
    assert client.get("/navigation/").json()["waypoints"] == []
