"""
List item API tests - partial updates, ownership, touch and metadata cascade.
"""

from datetime import datetime

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select

from minitracker.db.models import ListItem, Metadata

OLD = datetime(2020, 1, 1)


@pytest.mark.asyncio
async def test_update_item_partial(client: AsyncClient, list_item, auth_headers):
    response = await client.put(
        f"/api/v1/list-items/{list_item.id}",
        headers=auth_headers,
        json={"paintingStatus": "Base Coated", "notes": "Needs highlights"},
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["paintingStatus"] == "Base Coated"
    assert data["notes"] == "Needs highlights"
    # Untouched fields keep their values
    assert data["quantity"] == 2
    assert data["assemblyStatus"] == "Not Started"


@pytest.mark.asyncio
async def test_update_item_rejects_null_quantity(client: AsyncClient, list_item, auth_headers):
    response = await client.put(f"/api/v1/list-items/{list_item.id}", headers=auth_headers, json={"quantity": None})
    assert response.status_code == 400
    assert response.json()["error"]["field"] == "quantity"


@pytest.mark.asyncio
@pytest.mark.parametrize("quantity", [True, "3", 2.5])
async def test_update_item_rejects_non_integer_quantity(client: AsyncClient, list_item, auth_headers, quantity):
    response = await client.put(
        f"/api/v1/list-items/{list_item.id}", headers=auth_headers, json={"quantity": quantity}
    )
    assert response.status_code == 400
    assert response.json()["error"]["field"] == "quantity"


@pytest.mark.asyncio
async def test_update_item_invalid_status(client: AsyncClient, list_item, auth_headers):
    response = await client.put(
        f"/api/v1/list-items/{list_item.id}", headers=auth_headers, json={"assemblyStatus": "Half Built"}
    )
    assert response.status_code == 400
    assert response.json()["error"]["field"] == "assemblyStatus"


@pytest.mark.asyncio
async def test_update_item_requires_owner(client: AsyncClient, list_item, other_headers):
    anonymous = await client.put(f"/api/v1/list-items/{list_item.id}", json={"quantity": 3})
    assert anonymous.status_code == 401

    stranger = await client.put(f"/api/v1/list-items/{list_item.id}", headers=other_headers, json={"quantity": 3})
    assert stranger.status_code == 403


@pytest.mark.asyncio
async def test_missing_item(client: AsyncClient, auth_headers):
    response = await client.put("/api/v1/list-items/999", headers=auth_headers, json={"quantity": 3})
    assert response.status_code == 404
    assert response.json()["error"]["message"] == "List item not found"


@pytest.mark.asyncio
async def test_update_item_touches_list(client: AsyncClient, session, list_item, public_list, auth_headers):
    public_list.updated_at = OLD
    await session.flush()

    await client.put(f"/api/v1/list-items/{list_item.id}", headers=auth_headers, json={"quantity": 4})
    assert public_list.updated_at.replace(tzinfo=None) > OLD


@pytest.mark.asyncio
async def test_delete_item_cascades_metadata(client: AsyncClient, session, list_item, public_list, auth_headers):
    session.add(Metadata(list_item_id=list_item.id, techniques="Drybrush"))
    public_list.updated_at = OLD
    await session.flush()
    item_id = list_item.id

    response = await client.delete(f"/api/v1/list-items/{item_id}", headers=auth_headers)
    assert response.status_code == 200
    assert public_list.updated_at.replace(tzinfo=None) > OLD

    items = await session.execute(select(func.count()).select_from(ListItem).where(ListItem.id == item_id))
    assert items.scalar_one() == 0
    metadata = await session.execute(
        select(func.count()).select_from(Metadata).where(Metadata.list_item_id == item_id)
    )
    assert metadata.scalar_one() == 0


@pytest.mark.asyncio
async def test_delete_item_requires_owner(client: AsyncClient, list_item, other_headers):
    response = await client.delete(f"/api/v1/list-items/{list_item.id}", headers=other_headers)
    assert response.status_code == 403
