CSV = (
    "vin,MAKE,Model,Price,Create Date,Zip Code\n"
    '1HGCM82633A004352,Honda,Accord,"$20,000",2023-01-15,94107\n'
    ",,,,,\n"
    "JH4KA7561PC008269,Acura,Legend,-$50,not-a-date,\n"
)

def _post(client, body: str, provider="acme"):
    files = {"csv": ("vehicles.csv", body.encode("utf-8"), "text/csv")}
    return client.post("/import", files=files, data={"provider": provider})

def test_import_then_read(client):
    r = _post(client, CSV)
    assert r.status_code == 200, r.text
    out = r.json()
    assert out["ok"] is True
    assert out["provider"] == "acme"
    assert out["received"] == 3
    assert out["imported"] == 2
    assert out["dropped"] == 1
    assert out["failed"] == 0
    assert len(out["warnings"]) == 1
    assert out["warnings"][0]["row_index"] == 2
    assert out["warnings"][0]["field"] == "create_date"

    r2 = client.get("/vehicles")
    assert r2.status_code == 200
    data = r2.json()
    assert [v["vin"] for v in data] == ["1HGCM82633A004352", "JH4KA7561PC008269"]
    first, second = data
    assert first["provider"] == "acme"
    assert first["price"] == 20000
    assert first["create_date"].startswith("2023-01-15")
    assert first["zip_code"] == "94107"
    assert first["mileage"] is None
    assert second["price"] == -50
    assert second["create_date"] is None

def test_import_requires_provider(client):
    r = _post(client, CSV, provider="   ")
    assert r.status_code == 400

def test_import_requires_file(client):
    r = client.post("/import", data={"provider": "acme"})
    assert r.status_code == 400

def test_import_no_vehicles_is_400(client):
    r = _post(client, "Color,Doors\nred,4\n")
    assert r.status_code == 400
    r = _post(client, "VIN,Make\n")
    assert r.status_code == 400
    assert client.get("/vehicles").json() == []

def test_import_rejects_non_utf8(client):
    files = {"csv": ("v.csv", "VIN,Make\nA,Citroën\n".encode("latin-1"), "text/csv")}
    r = client.post("/import", files=files, data={"provider": "acme"})
    assert r.status_code == 400

def test_import_form(client):
    r = client.get("/import")
    assert r.status_code == 200
    assert 'name="csv"' in r.text
    assert 'name="provider"' in r.text

def test_import_storage_failure_rolls_back(client, monkeypatch):
    from vehicle_import.models import Vehicle
    from vehicle_import.routers import ingest

    def _broken_insert(db, records):
        db.add(Vehicle(**records[0]))
        db.flush()
        raise RuntimeError("disk full")

    monkeypatch.setattr(ingest, "insert_vehicles", _broken_insert)
    r = _post(client, CSV)
    assert r.status_code == 500
    assert "disk full" in r.json()["detail"]
    assert client.get("/vehicles").json() == []

def test_import_reports_rows_the_db_rejects(client, monkeypatch):
    from vehicle_import import repositories
    from vehicle_import.routers import ingest

    def _insert_with_bad_second_row(db, records):
        records = [records[0], dict(records[1], colour="red")]
        return repositories.insert_vehicles(db, records)

    monkeypatch.setattr(ingest, "insert_vehicles", _insert_with_bad_second_row)
    r = _post(client, CSV)
    assert r.status_code == 200, r.text
    out = r.json()
    assert out["imported"] == 1
    assert out["failed"] == 1
    assert out["errors"][0]["index"] == 1
    assert out["errors"][0]["vin"] == "JH4KA7561PC008269"
    assert [v["vin"] for v in client.get("/vehicles").json()] == ["1HGCM82633A004352"]
