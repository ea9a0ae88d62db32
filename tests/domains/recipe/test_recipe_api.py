import json
import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock
from uuid import uuid4

from core.di import get_cloudinary_client
from domains.media.client import UploadResult
from main import app

RECIPE_ID = uuid4()
USER_ID = uuid4()


def recipe_row(**overrides):
    row = {
        "id": RECIPE_ID,
        "title": "Flan",
        "description": "Flan casero",
        "category_id": 1,
        "category": "Postres",
        "image_url": None,
        "ingredients": [{"name": "Huevos", "amount": "4"}],
        "prep_time": "15 min",
        "cook_time": "45 min",
        "servings": 6,
        "difficulty": "Media",
        "user_id": USER_ID,
        "author": "Ana",
        "author_avatar": None,
        "created_at": datetime(2024, 5, 1, tzinfo=timezone.utc),
    }
    row.update(overrides)
    return row


@pytest.fixture
def fake_cloudinary():
    cloudinary = AsyncMock()
    cloudinary.upload.return_value = UploadResult(url="https://cdn.recetas.com/flan.jpg", public_id="recetas/flan")
    app.dependency_overrides[get_cloudinary_client] = lambda: cloudinary
    return cloudinary


@pytest.mark.asyncio
async def test_get_recipes(client, mock_db):
    """[API] GET /api/recipes"""
    mock_db.execute.return_value = [recipe_row()]

    response = await client.get("/api/recipes")

    assert response.status_code == 200
    data = response.json()
    assert data[0]["title"] == "Flan"
    assert data[0]["categoryId"] == 1
    assert data[0]["category"] == "Postres"
    assert data[0]["author"] == "Ana"
    assert data[0]["prepTime"] == "15 min"


@pytest.mark.asyncio
async def test_get_unknown_recipe(client, mock_db):
    mock_db.execute.return_value = []

    response = await client.get(f"/api/recipes/{uuid4()}")

    assert response.status_code == 404
    assert response.json() == {"error": "Receta no encontrada"}


@pytest.mark.asyncio
async def test_create_recipe(client, mock_db, executed):
    """[API] POST /api/recipes"""
    mock_db.execute.side_effect = [[{"id": RECIPE_ID}], [recipe_row()]]

    response = await client.post(
        "/api/recipes",
        json={
            "title": "Flan",
            "userId": str(USER_ID),
            "servings": "4",
            "difficulty": "Media",
            "ingredients": [{"name": "Huevos", "amount": "4"}],
        },
    )

    assert response.status_code == 201
    assert response.json()["id"] == str(RECIPE_ID)

    insert_stmt = mock_db.execute.await_args_list[0].args[0]
    params = insert_stmt.compile().params
    assert params["servings"] == 4
    assert params["ingredients"] == [{"name": "Huevos", "amount": "4"}]


@pytest.mark.asyncio
async def test_create_recipe_invalid_difficulty(client, mock_db):
    response = await client.post(
        "/api/recipes",
        json={"title": "Flan", "userId": str(USER_ID), "difficulty": "Extrema"},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Datos inválidos"
    assert "difficulty" in body["details"]["fieldErrors"]
    mock_db.execute.assert_not_called()


@pytest.mark.asyncio
async def test_create_recipe_missing_title(client, mock_db):
    response = await client.post("/api/recipes", json={"userId": str(USER_ID)})

    assert response.status_code == 400
    assert "title" in response.json()["details"]["fieldErrors"]


@pytest.mark.asyncio
async def test_update_recipe_partial(client, mock_db):
    """[API] PUT /api/recipes/{id} con un solo campo"""
    mock_db.execute.side_effect = [[{"id": RECIPE_ID}], [recipe_row(title="Flan de coco")]]

    response = await client.put(f"/api/recipes/{RECIPE_ID}", json={"title": "Flan de coco"})

    assert response.status_code == 200
    assert response.json()["title"] == "Flan de coco"

    update_stmt = mock_db.execute.await_args_list[0].args[0]
    assert set(update_stmt.compile().params) == {"title", "id_1"}


@pytest.mark.asyncio
async def test_update_recipe_empty_body(client, mock_db):
    response = await client.put(f"/api/recipes/{RECIPE_ID}", json={})

    assert response.status_code == 400
    assert response.json() == {"error": "No hay campos para actualizar"}
    mock_db.execute.assert_not_called()


@pytest.mark.asyncio
async def test_update_unknown_recipe(client, mock_db):
    mock_db.execute.return_value = []

    response = await client.put(f"/api/recipes/{RECIPE_ID}", json={"servings": 2})

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_recipe(client, mock_db):
    mock_db.execute.return_value = [{"id": RECIPE_ID}]

    response = await client.delete(f"/api/recipes/{RECIPE_ID}")

    assert response.status_code == 204
    assert response.content == b""


@pytest.mark.asyncio
async def test_delete_unknown_recipe(client, mock_db):
    mock_db.execute.return_value = []

    response = await client.delete(f"/api/recipes/{RECIPE_ID}")

    assert response.status_code == 404
    assert response.json() == {"error": "Receta no encontrada"}


@pytest.mark.asyncio
async def test_create_with_image(client, mock_db, fake_cloudinary):
    """[API] POST /api/recipes/with-image"""
    mock_db.execute.side_effect = [[{"id": RECIPE_ID}], [recipe_row(image_url="https://cdn.recetas.com/flan.jpg")]]

    response = await client.post(
        "/api/recipes/with-image",
        data={
            "title": "Flan",
            "userId": str(USER_ID),
            "servings": "4",
            "ingredients": json.dumps([{"name": "Huevos", "amount": "4"}]),
            "imageUrl": "https://otra.com/x.jpg",
            "description": "",
        },
        files={"image": ("flan.png", b"\x89PNG contenido", "image/png")},
    )

    assert response.status_code == 201
    assert response.json()["imageUrl"] == "https://cdn.recetas.com/flan.jpg"
    fake_cloudinary.upload.assert_awaited_once_with(b"\x89PNG contenido", "image/png")

    params = mock_db.execute.await_args_list[0].args[0].compile().params
    assert params["image_url"] == "https://cdn.recetas.com/flan.jpg"
    assert params["description"] is None
    assert params["servings"] == 4


@pytest.mark.asyncio
async def test_create_with_image_invalid_fields_skip_upload(client, mock_db, fake_cloudinary):
    response = await client.post(
        "/api/recipes/with-image",
        data={"title": "Flan", "userId": str(USER_ID), "difficulty": "Extrema"},
        files={"image": ("flan.png", b"png", "image/png")},
    )

    assert response.status_code == 400
    assert "difficulty" in response.json()["details"]["fieldErrors"]
    fake_cloudinary.upload.assert_not_called()
    mock_db.execute.assert_not_called()


@pytest.mark.asyncio
async def test_create_with_image_rejects_non_image(client, mock_db, fake_cloudinary):
    response = await client.post(
        "/api/recipes/with-image",
        data={"title": "Flan", "userId": str(USER_ID)},
        files={"image": ("notas.txt", b"texto", "text/plain")},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Solo se permiten archivos de imagen"}
    mock_db.execute.assert_not_called()


@pytest.mark.asyncio
async def test_user_recipes(client, mock_db):
    mock_db.execute.return_value = [recipe_row(), recipe_row(id=uuid4(), title="Tortilla")]

    response = await client.get(f"/api/users/{USER_ID}/recipes")

    assert response.status_code == 200
    assert [r["title"] for r in response.json()] == ["Flan", "Tortilla"]


@pytest.mark.asyncio
async def test_create_recipe_malformed_json(client, mock_db):
    response = await client.post(
        "/api/recipes",
        content='{"title": "Paella",',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    details = response.json()["details"]
    assert details["fieldErrors"] == {}
    assert len(details["formErrors"]) == 1
    mock_db.execute.assert_not_called()


@pytest.mark.asyncio
async def test_invalid_recipe_id_reports_camel_case(client, mock_db):
    response = await client.get("/api/recipes/no-es-uuid")

    assert response.status_code == 400
    assert list(response.json()["details"]["fieldErrors"]) == ["recipeId"]
