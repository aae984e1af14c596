"""
Descriptor de edición de personas.

Cada campo opcional representa "qué cambiar". None significa "sin cambios";
un texto vacío es un valor real (y la entidad lo rechazará si no lo admite).
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import FrozenSet, Optional, Tuple

from clinicbook.app.domain.enums import Genero, GrupoSanguineo
from clinicbook.app.domain.personas import Etiqueta, _to_etiquetas

CAMPOS_SOLO_PACIENTE_RECHAZADOS_EN_MEDICO: Tuple[str, ...] = ("condicion", "grupo_sanguineo")


@dataclass(frozen=True, slots=True)
class DescriptorEdicionPersona:
    nombre: Optional[str] = None
    telefono: Optional[str] = None
    contacto_emergencia: Optional[str] = None
    email: Optional[str] = None
    direccion: Optional[str] = None
    observacion: Optional[str] = None
    genero: Optional[Genero] = None
    documento: Optional[str] = None
    etiquetas: Optional[FrozenSet[Etiqueta]] = None
    condicion: Optional[str] = None
    grupo_sanguineo: Optional[GrupoSanguineo] = None

    def __post_init__(self) -> None:
        # Copia defensiva; un texto suelto se rechaza en vez de partirse en letras.
        if self.etiquetas is not None:
            object.__setattr__(self, "etiquetas", _to_etiquetas(self.etiquetas))

    def hay_campos_editados(self) -> bool:
        """True si al menos un campo trae valor (un set de etiquetas vacío cuenta: las borra)."""
        return any(getattr(self, f.name) is not None for f in fields(self))

    def campos_editados(self) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(self) if getattr(self, f.name) is not None)

    def campos_solo_paciente(self) -> Tuple[str, ...]:
        """Campos presentes que un médico no puede llevar."""
        return tuple(c for c in CAMPOS_SOLO_PACIENTE_RECHAZADOS_EN_MEDICO if getattr(self, c) is not None)

    def copia(self) -> DescriptorEdicionPersona:
        return replace(self)
