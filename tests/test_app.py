import pytest

from app import app
from defaults import default_grid
from io_files import format_grid, parse_grid
from rules import is_won


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


def test_default_endpoint(client):
    resp = client.get("/default")
    assert resp.status_code == 200
    data = resp.get_json()
    assert (data["rows"], data["cols"], data["wrapping"]) == (5, 5, False)
    assert data["won"] is False
    assert parse_grid(data["grid"]).equal(default_grid())
    assert "┘" in data["board"]


def test_solve_endpoint_returns_won_grid(client):
    resp = client.post("/solve", json={"grid": format_grid(default_grid())})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["ok"] is True
    assert data["won"] is True
    assert is_won(parse_grid(data["grid"]))


def test_solve_endpoint_accepts_raw_body(client):
    resp = client.post("/solve", data="2 1 0\nNN\nNN\n", content_type="text/plain")
    data = resp.get_json()
    assert data["ok"] is True
    assert data["grid"] == "2 1 0\nNS\nNN\n"


def test_solve_endpoint_reports_unsolvable(client):
    resp = client.post("/solve", json={"grid": "1 2 0\nNN CN\n"})
    data = resp.get_json()
    assert resp.status_code == 200
    assert data["ok"] is False
    assert data["grid"] == "1 2 0\nNN CN\n"
    assert "no solutions" in data["reason"]


def test_count_endpoint(client):
    resp = client.post("/count", json={"grid": "1 2 1\nNN NN\n"})
    assert resp.get_json()["count"] == 2


@pytest.mark.parametrize("route", ["/solve", "/count"])
def test_bad_grid_is_a_client_error(client, route):
    resp = client.post(route, json={"grid": "2 2 0\nQQ NN\nNN NN\n"})
    assert resp.status_code == 400
    data = resp.get_json()
    assert data["ok"] is False
    assert "QQ" in data["error"]

    resp = client.post(route, json={})
    assert resp.status_code == 400


def test_progress_is_never_cached(client):
    client.post("/count", json={"grid": "2 1 0\nNN\nNN\n"})
    resp = client.get("/progress")
    assert resp.headers["Cache-Control"] == "no-store, max-age=0"
    data = resp.get_json()
    assert data["mode"] == "count"
    assert data["solutions"] == 1
