"""
List API tests - visibility, statistics, ownership of writes, cascade and touch.
"""

from datetime import datetime

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select

from minitracker.core.statuses import AssemblyStatus, PaintingStatus
from minitracker.db.models import List, ListItem, Metadata

OLD = datetime(2020, 1, 1)


async def count_rows(session, model, *criteria) -> int:
    result = await session.execute(select(func.count()).select_from(model).where(*criteria))
    return result.scalar_one()


@pytest.mark.asyncio
async def test_create_list(client: AsyncClient, test_user, auth_headers):
    response = await client.post(
        "/api/v1/lists",
        headers=auth_headers,
        json={"name": "  Kill Team  ", "description": "", "isPublic": True},
    )
    assert response.status_code == 201
    data = response.json()["data"]
    assert data["name"] == "Kill Team"
    assert data["description"] is None
    assert data["isPublic"] is True
    assert data["userId"] == test_user.id


@pytest.mark.asyncio
async def test_create_list_requires_session(client: AsyncClient):
    response = await client.post("/api/v1/lists", json={"name": "Nope"})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_create_list_blank_name(client: AsyncClient, auth_headers):
    response = await client.post("/api/v1/lists", headers=auth_headers, json={"name": "   "})
    assert response.status_code == 400
    assert response.json()["error"]["field"] == "name"


@pytest.mark.asyncio
async def test_private_list_hidden_from_others(client: AsyncClient, private_list, other_headers):
    anonymous = await client.get(f"/api/v1/lists/{private_list.id}")
    assert anonymous.status_code == 403
    assert anonymous.json()["error"]["code"] == "FORBIDDEN"

    stranger = await client.get(f"/api/v1/lists/{private_list.id}", headers=other_headers)
    assert stranger.status_code == 403


@pytest.mark.asyncio
async def test_private_list_visible_to_owner(client: AsyncClient, private_list, test_user, auth_headers):
    response = await client.get(f"/api/v1/lists/{private_list.id}", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["list"]["id"] == private_list.id
    assert data["list"]["username"] == test_user.username


@pytest.mark.asyncio
async def test_missing_list(client: AsyncClient):
    response = await client.get("/api/v1/lists/999")
    assert response.status_code == 404
    assert response.json()["error"]["message"] == "List not found"


@pytest.mark.asyncio
async def test_public_list_readable_but_not_writable(client: AsyncClient, public_list, other_headers, miniatures):
    anonymous = await client.get(f"/api/v1/lists/{public_list.id}")
    assert anonymous.status_code == 200

    rename = await client.put(f"/api/v1/lists/{public_list.id}", headers=other_headers, json={"name": "Mine now"})
    assert rename.status_code == 403

    add = await client.post(
        f"/api/v1/lists/{public_list.id}/items", headers=other_headers, json={"miniatureId": miniatures[0].id}
    )
    assert add.status_code == 403

    delete = await client.delete(f"/api/v1/lists/{public_list.id}", headers=other_headers)
    assert delete.status_code == 403


@pytest.mark.asyncio
async def test_statistics_scenario(client: AsyncClient, session, public_list, miniatures):
    captain, squad, _ = miniatures
    session.add_all(
        [
            ListItem(
                list_id=public_list.id,
                miniature_id=captain.id,
                quantity=10,
                assembly_status=AssemblyStatus.ASSEMBLED,
                painting_status=PaintingStatus.FINISHED,
            ),
            ListItem(list_id=public_list.id, miniature_id=squad.id, quantity=5),
        ]
    )
    await session.flush()

    response = await client.get(f"/api/v1/lists/{public_list.id}")
    stats = response.json()["data"]["statistics"]
    assert stats["totalItems"] == 2
    assert stats["totalPoints"] == 1400
    assert stats["assemblyProgress"] == {"Not Started": 5, "In Progress": 0, "Assembled": 10}
    assert stats["paintingProgress"] == {
        "Unpainted": 5,
        "Primed": 0,
        "Base Coated": 0,
        "Detailed": 0,
        "Finished": 10,
    }

    again = await client.get(f"/api/v1/lists/{public_list.id}")
    assert again.json()["data"]["statistics"] == stats


@pytest.mark.asyncio
async def test_empty_list_statistics(client: AsyncClient, public_list):
    response = await client.get(f"/api/v1/lists/{public_list.id}")
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["items"] == []
    assert data["statistics"]["totalItems"] == 0
    assert data["statistics"]["totalPoints"] == 0
    assert set(data["statistics"]["assemblyProgress"].values()) == {0}
    assert set(data["statistics"]["paintingProgress"].values()) == {0}


@pytest.mark.asyncio
async def test_detail_items_are_enriched(client: AsyncClient, list_item, miniatures):
    response = await client.get(f"/api/v1/lists/{list_item.list_id}")
    item = response.json()["data"]["items"][0]
    assert item["miniatureName"] == miniatures[0].name
    assert item["factionName"] == "Space Marines"
    assert item["unitTypeName"] == "Infantry"
    assert item["pointsValue"] == 100
    assert item["quantity"] == 2


@pytest.mark.asyncio
async def test_own_lists_most_recent_first(
    client: AsyncClient, session, private_list, public_list, auth_headers, miniatures
):
    private_list.updated_at = OLD
    public_list.updated_at = datetime(2021, 1, 1)
    await session.flush()

    await client.post(
        f"/api/v1/lists/{private_list.id}/items", headers=auth_headers, json={"miniatureId": miniatures[0].id}
    )

    response = await client.get("/api/v1/lists", headers=auth_headers)
    assert response.status_code == 200
    lists = response.json()["data"]
    assert [lst["id"] for lst in lists] == [private_list.id, public_list.id]
    assert lists[0]["itemCount"] == 1
    assert lists[1]["itemCount"] == 0


@pytest.mark.asyncio
async def test_public_listing(client: AsyncClient, private_list, public_list, test_user):
    anonymous = await client.get("/api/v1/lists")
    page = anonymous.json()["data"]
    assert page["total"] == 1
    assert page["lists"][0]["id"] == public_list.id
    assert page["lists"][0]["username"] == test_user.username
    assert page["hasMore"] is False

    explicit = await client.get("/api/v1/lists/public", params={"page": 1, "limit": 10})
    assert explicit.json()["data"]["limit"] == 10
    assert [lst["id"] for lst in explicit.json()["data"]["lists"]] == [public_list.id]


@pytest.mark.asyncio
async def test_update_list_partial(client: AsyncClient, private_list, auth_headers):
    response = await client.put(f"/api/v1/lists/{private_list.id}", headers=auth_headers, json={"isPublic": True})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["isPublic"] is True
    assert data["name"] == "Pile of Shame"


@pytest.mark.asyncio
async def test_update_list_rejects_null_name(client: AsyncClient, private_list, auth_headers):
    response = await client.put(f"/api/v1/lists/{private_list.id}", headers=auth_headers, json={"name": None})
    assert response.status_code == 400
    assert response.json()["error"]["field"] == "name"


@pytest.mark.asyncio
async def test_add_item_defaults(client: AsyncClient, public_list, auth_headers, miniatures):
    response = await client.post(
        f"/api/v1/lists/{public_list.id}/items", headers=auth_headers, json={"miniatureId": miniatures[1].id}
    )
    assert response.status_code == 201
    data = response.json()["data"]
    assert data["quantity"] == 1
    assert data["assemblyStatus"] == "Not Started"
    assert data["paintingStatus"] == "Unpainted"


@pytest.mark.asyncio
async def test_add_item_validation(client: AsyncClient, public_list, auth_headers, miniatures):
    missing = await client.post(
        f"/api/v1/lists/{public_list.id}/items", headers=auth_headers, json={"miniatureId": 999}
    )
    assert missing.status_code == 404
    assert missing.json()["error"]["field"] == "miniatureId"

    zero = await client.post(
        f"/api/v1/lists/{public_list.id}/items",
        headers=auth_headers,
        json={"miniatureId": miniatures[0].id, "quantity": 0},
    )
    assert zero.status_code == 400
    assert zero.json()["error"]["field"] == "quantity"

    bad_status = await client.post(
        f"/api/v1/lists/{public_list.id}/items",
        headers=auth_headers,
        json={"miniatureId": miniatures[0].id, "paintingStatus": "Glazed"},
    )
    assert bad_status.status_code == 400
    assert bad_status.json()["error"]["field"] == "paintingStatus"


@pytest.mark.asyncio
@pytest.mark.parametrize("quantity", [True, "3"])
async def test_add_item_rejects_non_integer_quantity(
    client: AsyncClient, session, public_list, auth_headers, miniatures, quantity
):
    response = await client.post(
        f"/api/v1/lists/{public_list.id}/items",
        headers=auth_headers,
        json={"miniatureId": miniatures[0].id, "quantity": quantity},
    )
    assert response.status_code == 400
    assert response.json()["error"]["field"] == "quantity"
    assert await count_rows(session, ListItem, ListItem.list_id == public_list.id) == 0


@pytest.mark.asyncio
async def test_add_item_touches_list(client: AsyncClient, session, public_list, auth_headers, miniatures):
    public_list.updated_at = OLD
    await session.flush()

    await client.post(
        f"/api/v1/lists/{public_list.id}/items", headers=auth_headers, json={"miniatureId": miniatures[0].id}
    )
    assert public_list.updated_at.replace(tzinfo=None) > OLD


@pytest.mark.asyncio
async def test_delete_list_cascades(client: AsyncClient, session, list_item, auth_headers):
    session.add(Metadata(list_item_id=list_item.id, paint_colors="Red"))
    await session.flush()
    list_id = list_item.list_id

    response = await client.delete(f"/api/v1/lists/{list_id}", headers=auth_headers)
    assert response.status_code == 200

    assert await count_rows(session, List, List.id == list_id) == 0
    assert await count_rows(session, ListItem, ListItem.list_id == list_id) == 0
    assert await count_rows(session, Metadata, Metadata.list_item_id == list_item.id) == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/api/v1/lists", "/api/v1/lists/public"])
async def test_page_number_is_bounded(client: AsyncClient, path):
    response = await client.get(path, params={"page": 10**19})
    assert response.status_code == 400
    assert response.json()["error"]["field"] == "page"
