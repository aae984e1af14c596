from __future__ import annotations

from typing import Callable, Dict, List

from clinicbook.app.domain.enums import RolPersona
from clinicbook.app.domain.personas import Paciente, Persona

MENSAJE_EDICION_OK = "Edited Person: {}"


def formatear_persona(persona: Persona) -> str:
    """Representación de una línea usada en los mensajes de resultado."""
    etiquetas = "".join(f"[{nombre}]" for nombre in persona.nombres_etiquetas())
    partes = [
        persona.nombre,
        f"NRIC: {persona.documento}",
        f"Phone: {persona.telefono}",
        f"Email: {persona.email}",
        f"Address: {persona.direccion}",
        f"Gender: {persona.genero.value}",
        f"Remark: {persona.observacion}",
        f"Tags: {etiquetas}",
    ]
    partes.extend(_PARTES_EXTRA_POR_ROL[persona.rol](persona))
    return "; ".join(partes)


def _partes_paciente(paciente: Paciente) -> List[str]:
    return [
        f"Emergency Contact: {paciente.contacto_emergencia}",
        f"Condition: {paciente.condicion}",
        f"Blood Type: {paciente.grupo_sanguineo.value}",
    ]


def _sin_partes_extra(_persona: Persona) -> List[str]:
    return []


_PARTES_EXTRA_POR_ROL: Dict[RolPersona, Callable[..., List[str]]] = {
    RolPersona.PACIENTE: _partes_paciente,
    RolPersona.MEDICO: _sin_partes_extra,
}


def mensaje_edicion_ok(persona: Persona) -> str:
    return MENSAJE_EDICION_OK.format(formatear_persona(persona))
