# infrastructure/memoria/repos_personas.py
"""
Repositorio en memoria para pacientes y médicos.

Responsabilidades:
- Guardar las instancias canónicas de Paciente y Medico en orden de alta
- Mantener el invariante "un documento, una persona"
- Sustituir una persona por su versión editada en el mismo hueco
- Mantener el filtro del listado visible

No contiene:
- Persistencia a disco
- Lógica de UI
"""

from __future__ import annotations

import threading
from contextlib import AbstractContextManager
from typing import Iterable, List, Optional, Tuple

from clinicbook.app.bootstrap_logging import get_logger
from clinicbook.app.domain.enums import RolPersona
from clinicbook.app.domain.exceptions import DuplicateRecordError, RecordNotFoundError
from clinicbook.app.domain.personas import Medico, Paciente, Persona
from clinicbook.app.domain.repositorios import (
    PREDICADO_MOSTRAR_TODOS,
    PredicadoPersona,
    RepositorioPersonas,
)


LOGGER = get_logger(__name__)


class PersonasRepositoryMemoria(RepositorioPersonas):
    """
    Almacén en memoria protegido por un único RLock.

    El mismo lock se entrega en operacion_atomica(), así un caso de uso puede
    encadenar lecturas y el reemplazo final sin que otro hilo escriba en medio.
    """

    def __init__(self, personas: Optional[Iterable[Persona]] = None) -> None:
        self._lock = threading.RLock()
        self._personas: List[Persona] = []
        self._filtro: PredicadoPersona = PREDICADO_MOSTRAR_TODOS
        for persona in personas or ():
            self.anadir(persona)

    # --------------------------------------------------------------
    # Altas
    # --------------------------------------------------------------

    def anadir(self, persona: Persona) -> None:
        with self._lock:
            if self.existe_persona(persona):
                raise DuplicateRecordError()
            self._personas.append(persona)
        LOGGER.debug("persona_anadida rol=%s", persona.rol.value)

    # --------------------------------------------------------------
    # Lecturas
    # --------------------------------------------------------------

    def listar_todos(self) -> Tuple[Persona, ...]:
        with self._lock:
            return tuple(self._personas)

    def listar_medicos(self) -> Tuple[Medico, ...]:
        with self._lock:
            return tuple(p for p in self._personas if p.rol is RolPersona.MEDICO)

    def listar_pacientes(self) -> Tuple[Paciente, ...]:
        with self._lock:
            return tuple(p for p in self._personas if p.rol is RolPersona.PACIENTE)

    def listar_filtrados(self) -> Tuple[Persona, ...]:
        with self._lock:
            return tuple(p for p in self._personas if self._filtro(p))

    def existe_persona(self, persona: Persona) -> bool:
        with self._lock:
            return any(p.es_misma_persona(persona) for p in self._personas)

    @property
    def filtro_activo(self) -> PredicadoPersona:
        return self._filtro

    # --------------------------------------------------------------
    # Escrituras
    # --------------------------------------------------------------

    def reemplazar(self, original: Persona, editada: Persona) -> None:
        with self._lock:
            indice = self._indice_de(original)
            if indice is None:
                raise RecordNotFoundError()
            if not original.es_misma_persona(editada) and self.existe_persona(editada):
                raise DuplicateRecordError()
            self._personas[indice] = editada
        LOGGER.debug("persona_reemplazada rol=%s posicion=%s", editada.rol.value, indice)

    def aplicar_filtro(self, predicado: PredicadoPersona) -> None:
        with self._lock:
            self._filtro = predicado

    def operacion_atomica(self) -> AbstractContextManager:
        return self._lock

    # --------------------------------------------------------------
    # Internos
    # --------------------------------------------------------------

    def _indice_de(self, persona: Persona) -> Optional[int]:
        for i, p in enumerate(self._personas):
            if p == persona:
                return i
        return None
