"""
Entidades de dominio relacionadas con personas.

Decisiones:
- Pacientes y médicos comparten los campos de Persona; solo Paciente añade
  contacto de emergencia, condición y grupo sanguíneo. Un Medico no expone
  esos atributos.
- Las entidades son inmutables (frozen). Editar una persona consiste en
  construir una instancia nueva del mismo tipo.
- `rol` es la etiqueta de variante: los casos de uso despachan por ella.
- La identidad de una persona es su documento, con independencia del rol.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, ClassVar, Dict, FrozenSet, Iterable, Optional

from clinicbook.app.domain.enums import Genero, GrupoSanguineo, RolPersona
from clinicbook.app.domain.exceptions import ValidationError
from clinicbook.app.domain.value_objects import (
    _require_non_empty,
    _validate_documento,
    _validate_email_basic,
    _validate_nombre_etiqueta,
    _validate_phone_basic,
)


@dataclass(frozen=True, slots=True)
class Etiqueta:
    nombre: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "nombre", _validate_nombre_etiqueta(self.nombre))

    def __str__(self) -> str:
        return f"[{self.nombre}]"


def _to_etiquetas(valores: Iterable[Etiqueta | str]) -> FrozenSet[Etiqueta]:
    if isinstance(valores, (str, bytes)):
        raise ValidationError("etiquetas debe ser una colección, no un texto.")
    return frozenset(v if isinstance(v, Etiqueta) else Etiqueta(v) for v in valores)


def _to_enum(enum_cls: type[Enum], value: Any, field_name: str) -> Any:
    try:
        return enum_cls(value)
    except ValueError as e:
        raise ValidationError(f"{field_name} inválido: {value!r}.") from e


@dataclass(frozen=True, slots=True)
class Persona:
    """Clase base para personas del dominio (no se instancia directamente)."""

    rol: ClassVar[RolPersona]

    nombre: str
    telefono: str
    email: str
    direccion: str
    observacion: str
    genero: Genero
    documento: str
    etiquetas: FrozenSet[Etiqueta]

    def __post_init__(self) -> None:
        if type(self) is Persona:
            raise TypeError("Persona es abstracta: usa Paciente o Medico.")
        self.validar()

    def validar(self) -> None:
        """Invariantes comunes para cualquier persona."""
        self._fijar("nombre", _require_non_empty(self.nombre, "nombre"))
        self._fijar("telefono", _validate_phone_basic(self.telefono))
        self._fijar("email", _validate_email_basic(self.email))
        self._fijar("direccion", _require_non_empty(self.direccion, "direccion"))
        self._fijar("observacion", (self.observacion or "").strip())
        self._fijar("genero", _to_enum(Genero, self.genero, "genero"))
        self._fijar("documento", _validate_documento(self.documento))
        self._fijar("etiquetas", _to_etiquetas(self.etiquetas))

    def _fijar(self, campo: str, valor: Any) -> None:
        # Solo durante la construcción.
        object.__setattr__(self, campo, valor)

    def es_misma_persona(self, otra: Optional[Persona]) -> bool:
        """Equivalencia de identidad: mismo documento, sin comparar el resto de campos."""
        if otra is self:
            return True
        return otra is not None and otra.documento == self.documento

    def nombres_etiquetas(self) -> list[str]:
        return sorted(e.nombre for e in self.etiquetas)

    def to_dict(self) -> Dict[str, Any]:
        """Serialización básica a dict (útil para logs o exportaciones)."""
        data: Dict[str, Any] = {"rol": self.rol.value}
        for f in fields(self):
            value = getattr(self, f.name)
            data[f.name] = value.value if isinstance(value, Enum) else value
        data["etiquetas"] = self.nombres_etiquetas()
        return data


@dataclass(frozen=True, slots=True)
class Medico(Persona):
    """Médico: solo los campos comunes."""

    rol: ClassVar[RolPersona] = RolPersona.MEDICO


@dataclass(frozen=True, slots=True)
class Paciente(Persona):
    """Paciente: campos comunes + contacto de emergencia, condición y grupo sanguíneo."""

    rol: ClassVar[RolPersona] = RolPersona.PACIENTE

    contacto_emergencia: str
    condicion: str
    grupo_sanguineo: GrupoSanguineo

    def validar(self) -> None:
        super(Paciente, self).validar()
        self._fijar("contacto_emergencia", _validate_phone_basic(self.contacto_emergencia, "contacto_emergencia"))
        self._fijar("condicion", _require_non_empty(self.condicion, "condicion"))
        self._fijar("grupo_sanguineo", _to_enum(GrupoSanguineo, self.grupo_sanguineo, "grupo_sanguineo"))
