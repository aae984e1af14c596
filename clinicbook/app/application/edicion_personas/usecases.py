# application/edicion_personas/usecases.py
"""
Caso de uso: Editar persona (paciente o médico) a partir de su documento.

Reglas principales:
- El descriptor debe traer al menos un campo; si no, se rechaza antes de
  consultar el repositorio.
- Se busca la única persona con ese documento entre médicos y pacientes.
  Dos coincidencias indican datos corruptos: se registra como fallo fatal y
  no se intenta reparar.
- Cada campo presente sustituye entero al original (las etiquetas también:
  no se suman ni se restan una a una). Los ausentes se conservan.
- Un médico no admite condición ni grupo sanguíneo.
- Si la edición cambia la identidad (documento) y esa identidad ya existe en
  otra persona, se rechaza como duplicado.
- Buscar, validar y guardar ocurre dentro de `repo.operacion_atomica()`.
  Cualquier error corta el flujo sin tocar el repositorio.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, TypeVar

from clinicbook.app.application.edicion_personas.descriptor import DescriptorEdicionPersona
from clinicbook.app.application.edicion_personas.mensajes import mensaje_edicion_ok
from clinicbook.app.application.security import OPERACION_EDITAR_PERSONA, UserContext
from clinicbook.app.bootstrap_logging import contexto_operacion, get_logger, log_fatal
from clinicbook.app.domain.enums import RolPersona
from clinicbook.app.domain.exceptions import (
    DomainError,
    DuplicateRecordError,
    InapplicableFieldForRoleError,
    InternalConsistencyError,
    NoFieldsSpecifiedError,
    RecordNotFoundError,
    ValidationError,
)
from clinicbook.app.domain.personas import Medico, Paciente, Persona
from clinicbook.app.domain.repositorios import PREDICADO_MOSTRAR_TODOS, RepositorioPersonas


LOGGER = get_logger(__name__)

T = TypeVar("T")


# ---------------------------------------------------------------------
# Tipos auxiliares
# ---------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class EditarPersonaResult:
    mensaje: str
    persona: Persona


# ---------------------------------------------------------------------
# Construcción de la persona editada
# ---------------------------------------------------------------------


def _valor(nuevo: Optional[T], actual: T) -> T:
    return actual if nuevo is None else nuevo


def _campos_comunes(original: Persona, d: DescriptorEdicionPersona) -> Dict[str, Any]:
    return {
        "nombre": _valor(d.nombre, original.nombre),
        "telefono": _valor(d.telefono, original.telefono),
        "email": _valor(d.email, original.email),
        "direccion": _valor(d.direccion, original.direccion),
        "observacion": _valor(d.observacion, original.observacion),
        "genero": _valor(d.genero, original.genero),
        "documento": _valor(d.documento, original.documento),
        "etiquetas": _valor(d.etiquetas, original.etiquetas),
    }


def _crear_paciente_editado(original: Paciente, d: DescriptorEdicionPersona) -> Paciente:
    return Paciente(
        **_campos_comunes(original, d),
        contacto_emergencia=_valor(d.contacto_emergencia, original.contacto_emergencia),
        condicion=_valor(d.condicion, original.condicion),
        grupo_sanguineo=_valor(d.grupo_sanguineo, original.grupo_sanguineo),
    )


def _crear_medico_editado(original: Medico, d: DescriptorEdicionPersona) -> Medico:
    campos_no_aplicables = d.campos_solo_paciente()
    if campos_no_aplicables:
        raise InapplicableFieldForRoleError(campos_no_aplicables)
    return Medico(**_campos_comunes(original, d))


_CONSTRUCTORES_POR_ROL: Dict[RolPersona, Callable[[Any, DescriptorEdicionPersona], Persona]] = {
    RolPersona.PACIENTE: _crear_paciente_editado,
    RolPersona.MEDICO: _crear_medico_editado,
}


# ---------------------------------------------------------------------
# Use case
# ---------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class EditarPersonaUseCase:
    repo: RepositorioPersonas
    user_context: UserContext

    def execute(self, documento: str, descriptor: DescriptorEdicionPersona) -> EditarPersonaResult:
        with contexto_operacion(OPERACION_EDITAR_PERSONA):
            try:
                return self._execute(documento, descriptor)
            except DomainError as exc:
                LOGGER.info("edicion_persona_rechazada codigo=%s", exc.codigo)
                raise

    def _execute(self, documento: str, descriptor: DescriptorEdicionPersona) -> EditarPersonaResult:
        self.user_context.require_write(OPERACION_EDITAR_PERSONA)
        documento = self._validate_request(documento, descriptor)
        descriptor = descriptor.copia()

        with self.repo.operacion_atomica():
            original = self._buscar_persona(documento)
            candidata = self._construir_candidata(original, descriptor)
            self._assert_sin_duplicado(original, candidata)
            self._persist(original, candidata)

        LOGGER.info(
            "persona_editada rol=%s campos=%s",
            candidata.rol.value,
            ",".join(descriptor.campos_editados()),
        )
        return EditarPersonaResult(mensaje=mensaje_edicion_ok(candidata), persona=candidata)

    # -----------------------------------------------------------------
    # Internos
    # -----------------------------------------------------------------

    def _validate_request(self, documento: str, descriptor: DescriptorEdicionPersona) -> str:
        if descriptor is None:
            raise ValidationError("descriptor es obligatorio.")
        # Descriptor vacío: NoFieldsSpecified sea cual sea el documento.
        if not descriptor.hay_campos_editados():
            raise NoFieldsSpecifiedError()
        normalizado = (documento or "").strip().upper()
        if not normalizado:
            raise ValidationError("documento es obligatorio.")
        return normalizado

    def _buscar_persona(self, documento: str) -> Persona:
        personas = [*self.repo.listar_medicos(), *self.repo.listar_pacientes()]
        coincidencias = [p for p in personas if p.documento == documento]
        if not coincidencias:
            raise RecordNotFoundError()
        if len(coincidencias) > 1:
            log_fatal(
                LOGGER,
                "documento_duplicado_en_repositorio",
                {"coincidencias": len(coincidencias)},
            )
            raise InternalConsistencyError(
                f"Hay {len(coincidencias)} personas con el mismo documento: el repositorio está corrupto."
            )
        return coincidencias[0]

    def _construir_candidata(self, original: Persona, descriptor: DescriptorEdicionPersona) -> Persona:
        constructor = _CONSTRUCTORES_POR_ROL[original.rol]
        return constructor(original, descriptor)

    def _assert_sin_duplicado(self, original: Persona, candidata: Persona) -> None:
        if not original.es_misma_persona(candidata) and self.repo.existe_persona(candidata):
            raise DuplicateRecordError()

    def _persist(self, original: Persona, candidata: Persona) -> None:
        self.repo.reemplazar(original, candidata)
        self.repo.aplicar_filtro(PREDICADO_MOSTRAR_TODOS)
