import httpx

from conftest import DOMAINS, overdrive_page


def test_search_returns_overdrive_results(client, catalogs):
    for d in ("lib3", "lib4", "lib5"):
        catalogs.pages[d] = overdrive_page(d, {"title": "Dune"})

    resp = client.get("/", params={"query": "dune"})

    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/json"
    assert resp.headers["access-control-allow-origin"] == "*"
    body = resp.json()
    assert list(body) == ["Overdrive"]
    assert len(body["Overdrive"]) == 3
    assert {e["library"] for e in body["Overdrive"]} == {"lib3", "lib4", "lib5"}
    assert all(e["data"] == {"title": "Dune"} for e in body["Overdrive"])


def test_search_with_no_hits_is_still_ok(client, catalogs):
    resp = client.get("/", params={"query": "zzzzqqq"})
    assert resp.status_code == 200
    assert resp.json() == {"Overdrive": []}
    assert len(catalogs.requests) == len(DOMAINS)


def test_search_survives_unreachable_library(client, catalogs):
    catalogs.pages["lib1"] = overdrive_page("lib1", {"title": "Dune"})
    catalogs.pages["lib2"] = httpx.ConnectError("connection refused")

    resp = client.get("/", params={"query": "dune"})

    assert resp.status_code == 200
    assert resp.json() == {"Overdrive": [{"library": "lib1", "data": {"title": "Dune"}}]}


def test_missing_query_is_bad_request(client, catalogs):
    resp = client.get("/")
    assert resp.status_code == 400
    assert resp.content == b""
    assert resp.headers["access-control-allow-origin"] == "*"
    assert catalogs.requests == []


def test_empty_query_is_bad_request(client, catalogs):
    resp = client.get("/", params={"query": ""})
    assert resp.status_code == 400
    assert resp.content == b""
    assert catalogs.requests == []


def test_request_id_is_echoed(client):
    resp = client.get("/health", headers={"X-Request-Id": "abc123"})
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
    assert resp.headers["x-request-id"] == "abc123"


def test_request_id_is_generated(client):
    resp = client.get("/", params={"query": "dune"})
    assert resp.headers["x-request-id"]


def test_libraries_lists_configured_services(client):
    resp = client.get("/libraries")
    assert resp.status_code == 200
    services = {s["key"]: s for s in resp.json()}
    assert services["overdrive"]["domains"] == DOMAINS
    assert services["overdrive"]["url_template"] == "https://{domain}.overdrive.com/search"
    assert "cloudlibrary" in services
