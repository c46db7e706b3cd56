"""PC build catalog API tests."""

import uuid

import pytest


BUILD = {"buildName": "Budget Gamer", "price": "799", "builder": "alice"}


async def _create(client, **overrides) -> dict:
    r = await client.post("/pcs", json={**BUILD, **overrides})
    assert r.status_code == 201, r.text
    return r.json()


@pytest.mark.asyncio
async def test_create_build(client):
    build = await _create(client)
    assert build["buildName"] == "Budget Gamer"
    assert build["price"] == "799"
    assert build["builder"] == "alice"
    assert "id" in build
    assert "createdAt" in build
    assert "updatedAt" in build


@pytest.mark.asyncio
async def test_create_build_accepts_legacy_builder_field(client):
    r = await client.post(
        "/pcs", json={"buildName": "Old Client", "price": "1200", "buidler": "bob"}
    )
    assert r.status_code == 201
    assert r.json()["builder"] == "bob"
    assert "buidler" not in r.json()


@pytest.mark.asyncio
async def test_create_build_numeric_price(client):
    build = await _create(client, price=1499)
    assert build["price"] == "1499"


@pytest.mark.asyncio
@pytest.mark.parametrize("missing", ["buildName", "price", "builder"])
async def test_create_build_missing_field(client, missing):
    body = dict(BUILD)
    del body[missing]
    r = await client.post("/pcs", json=body)
    assert r.status_code == 400
    assert r.json()["message"] == "Please fill in all required fields"


@pytest.mark.asyncio
async def test_list_builds(client):
    await _create(client, buildName="First")
    await _create(client, buildName="Second")

    r = await client.get("/pcs")
    assert r.status_code == 200
    names = [b["buildName"] for b in r.json()]
    assert names == ["First", "Second"]


@pytest.mark.asyncio
async def test_get_build(client):
    build = await _create(client)
    r = await client.get(f"/pcs/{build['id']}")
    assert r.status_code == 200
    assert r.json() == build


@pytest.mark.asyncio
@pytest.mark.parametrize("build_id", [str(uuid.uuid4()), "not-a-uuid"])
async def test_get_build_not_found(client, build_id):
    r = await client.get(f"/pcs/{build_id}")
    assert r.status_code == 404
    assert r.json()["message"] == "Unable to find pc"


@pytest.mark.asyncio
async def test_update_build_partial(client):
    build = await _create(client)
    r = await client.put(f"/pcs/{build['id']}", json={"price": "849"})
    assert r.status_code == 200
    updated = r.json()
    assert updated["price"] == "849"
    assert updated["buildName"] == build["buildName"]
    assert updated["builder"] == build["builder"]


@pytest.mark.asyncio
async def test_update_missing_build(client):
    r = await client.put(f"/pcs/{uuid.uuid4()}", json={"price": "1"})
    assert r.status_code == 404
    assert r.json()["message"] == "Unable to find pc"


@pytest.mark.asyncio
async def test_delete_build(client):
    build = await _create(client)
    r = await client.delete(f"/pcs/{build['id']}")
    assert r.status_code == 200
    data = r.json()
    assert data["message"] == "Deleted successfully"
    assert data["deletedPc"]["id"] == build["id"]

    r = await client.get(f"/pcs/{build['id']}")
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_delete_missing_build(client):
    r = await client.delete(f"/pcs/{uuid.uuid4()}")
    assert r.status_code == 404
