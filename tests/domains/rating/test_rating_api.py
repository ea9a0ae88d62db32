import pytest
from uuid import uuid4

USER_ID = uuid4()
RECIPE_ID = uuid4()


@pytest.mark.asyncio
async def test_rating_put_returns_stored_row(client, mock_db):
    """[API] PUT devuelve la fila guardada"""
    mock_db.execute.return_value = [{"user_id": USER_ID, "recipe_id": RECIPE_ID, "rating": 5}]

    response = await client.put(f"/api/users/{USER_ID}/ratings/{RECIPE_ID}", json={"rating": 5})

    assert response.status_code == 200
    assert response.json() == {"userId": str(USER_ID), "recipeId": str(RECIPE_ID), "rating": 5}


@pytest.mark.parametrize("rating", [0, 6, "cinco"])
@pytest.mark.asyncio
async def test_rating_out_of_range(client, mock_db, rating):
    response = await client.put(f"/api/users/{USER_ID}/ratings/{RECIPE_ID}", json={"rating": rating})

    assert response.status_code == 400
    assert "rating" in response.json()["details"]["fieldErrors"]
    mock_db.execute.assert_not_called()


@pytest.mark.asyncio
async def test_summary_without_ratings(client, mock_db):
    mock_db.execute.return_value = [{"average": None, "count": 0}]

    response = await client.get(f"/api/recipes/{RECIPE_ID}/ratings")

    assert response.json() == {"average": 0, "count": 0}


@pytest.mark.asyncio
async def test_get_user_rating(client, mock_db):
    mock_db.execute.return_value = [{"rating": 4}]

    response = await client.get(f"/api/users/{USER_ID}/ratings/{RECIPE_ID}")

    assert response.json() == {"rating": 4}


@pytest.mark.asyncio
async def test_delete_rating(client, mock_db):
    response = await client.delete(f"/api/users/{USER_ID}/ratings/{RECIPE_ID}")

    assert response.status_code == 204
