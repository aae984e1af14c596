from clinicbook.app.application.edicion_personas.descriptor import DescriptorEdicionPersona
from clinicbook.app.application.edicion_personas.usecases import EditarPersonaResult, EditarPersonaUseCase

__all__ = [
    "DescriptorEdicionPersona",
    "EditarPersonaResult",
    "EditarPersonaUseCase",
]
