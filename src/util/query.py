# src/util/query.py
from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass
class Assignments:
    columns: list[str] = field(default_factory=list)
    params: list[Any] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.columns)

    def as_dict(self) -> dict[str, Any]:
        return dict(zip(self.columns, self.params))


def build_assignments(changes: Mapping[str, Any], columns: Mapping[str, str]) -> Assignments:
    """Arma la lista ordenada de asignaciones para un UPDATE parcial.

    ``changes`` contiene solo los campos enviados por el cliente (un valor
    ``None`` significa "poner a NULL"). ``columns`` traduce cada campo a su
    columna y fija el orden de salida. Los campos desconocidos se ignoran.
    Los valores nunca se mezclan con el texto de la sentencia.
    """
    assignments = Assignments()

    for field_name, column in columns.items():
        if field_name not in changes:
            continue
        assignments.columns.append(column)
        assignments.params.append(changes[field_name])

    return assignments
