from clinicbook.app.domain.personas import Etiqueta, Medico, Paciente, Persona
from clinicbook.app.domain.enums import *  # noqa: F401,F403
from clinicbook.app.domain.exceptions import *  # noqa: F401,F403

__all__ = [
    "Persona",
    "Paciente",
    "Medico",
    "Etiqueta",
]
