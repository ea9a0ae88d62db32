import json
from datetime import datetime
from typing import Any, Literal
from uuid import UUID

from pydantic import Field, field_validator
from starlette.datastructures import FormData, UploadFile

from core.schemas import CamelModel, HttpUrlStr

Difficulty = Literal["Fácil", "Media", "Difícil"]


class IngredientItem(CamelModel):
    name: str = Field(..., min_length=1)
    amount: str = ""


class RecipeCreateRequest(CamelModel):
    title: str = Field(..., min_length=1)
    description: str | None = None
    category_id: int | None = None
    image_url: HttpUrlStr | None = None
    ingredients: list[IngredientItem] | None = None
    prep_time: str | None = None
    cook_time: str | None = None
    servings: int | None = Field(None, gt=0)
    difficulty: Difficulty | None = None
    user_id: UUID


class RecipeUpdateRequest(CamelModel):
    title: str | None = Field(None, min_length=1)
    description: str | None = None
    category_id: int | None = None
    image_url: HttpUrlStr | None = None
    ingredients: list[IngredientItem] | None = None
    prep_time: str | None = None
    cook_time: str | None = None
    servings: int | None = Field(None, gt=0)
    difficulty: Difficulty | None = None

    @field_validator("title")
    @classmethod
    def title_not_null(cls, v):
        if v is None:
            raise ValueError("El título no puede estar vacío")
        return v

    def changes(self) -> dict[str, Any]:
        """Solo los campos que vinieron en el body."""
        return self.model_dump(include=self.model_fields_set)


class RecipeResponse(CamelModel):
    id: UUID
    title: str
    description: str | None = None
    category_id: int | None = None
    category: str | None = None
    image_url: str | None = None
    ingredients: list[IngredientItem] | None = None
    prep_time: str | None = None
    cook_time: str | None = None
    servings: int | None = None
    difficulty: str | None = None
    user_id: UUID
    author: str | None = None
    author_avatar: str | None = None
    created_at: datetime


def parse_recipe_form(form: FormData) -> tuple[dict[str, Any], UploadFile | None]:
    """Convierte un formulario multipart en el dict que valida RecipeCreateRequest.

    Los campos vacíos se descartan, ``ingredients`` llega como texto JSON y,
    si hay imagen adjunta, cualquier ``imageUrl`` del formulario se ignora.
    """
    data: dict[str, Any] = {}
    image: UploadFile | None = None

    for key, value in form.multi_items():
        if isinstance(value, UploadFile):
            if key == "image" and value.filename:
                image = value
            continue
        if value == "":
            continue
        data[key] = value

    if "ingredients" in data:
        try:
            data["ingredients"] = json.loads(data["ingredients"])
        except json.JSONDecodeError:
            pass  # queda como texto y la validación lo rechaza

    if image is not None:
        data.pop("imageUrl", None)
        data.pop("image_url", None)

    return data, image
