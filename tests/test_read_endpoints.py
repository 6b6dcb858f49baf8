def test_healthz(client):
    r = client.get("/healthz")
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True
    assert "vin" in body["columns"]

def test_list_vehicles(client, seed_sample):
    r = client.get("/vehicles")
    assert r.status_code == 200
    data = r.json()
    assert [v["uuid"] for v in data] == ["a-1", "a-2", "b-1"]
    assert data[0]["price"] == 20000.0
    assert data[2]["price"] is None

def test_list_vehicles_limit(client, seed_sample):
    r = client.get("/vehicles", params={"limit": 2})
    assert r.status_code == 200
    assert len(r.json()) == 2

def test_list_vehicles_bad_limit_falls_back(client, seed_sample):
    for lim in ("abc", "0", "-3", "500"):
        r = client.get("/vehicles", params={"limit": lim})
        assert r.status_code == 200
        assert len(r.json()) == 3

def test_resolve_limit():
    from vehicle_import.routers.read import resolve_limit
    assert resolve_limit(None) == 50
    assert resolve_limit("10") == 10
    assert resolve_limit("200") == 200
    assert resolve_limit("201") == 50
    assert resolve_limit("x") == 50

def test_resolve_limit_reads_leading_integer():
    from vehicle_import.routers.read import resolve_limit
    assert resolve_limit("10abc") == 10
    assert resolve_limit(" 7 ") == 7
    assert resolve_limit("abc10") == 50
    assert resolve_limit("-5") == 50

def test_list_vehicles_limit_with_trailing_text(client, seed_sample):
    r = client.get("/vehicles", params={"limit": "2rows"})
    assert r.status_code == 200
    assert len(r.json()) == 2
