# src/core/schemas.py
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, HttpUrl, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

_http_url_adapter = TypeAdapter(HttpUrl)


def _check_http_url(value: str) -> str:
    try:
        _http_url_adapter.validate_python(value)
    except ValidationError:
        raise ValueError("URL inválida")
    return value


# URL validada pero conservada tal cual la envió el cliente
HttpUrlStr = Annotated[str, AfterValidator(_check_http_url)]


class CamelModel(BaseModel):
    """Modelo base: snake_case en Python, camelCase en JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
