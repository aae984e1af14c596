from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager, nullcontext
from typing import Callable, Sequence

from clinicbook.app.domain.personas import Medico, Paciente, Persona
# Importamos modelos del dominio porque el repositorio devuelve/usa esas entidades.

PredicadoPersona = Callable[[Persona], bool]


def mostrar_todas(persona: Persona) -> bool:
    """Filtro que deja visibles todas las personas."""
    return True


PREDICADO_MOSTRAR_TODOS: PredicadoPersona = mostrar_todas


class RepositorioPersonas(ABC):
    """
    Contrato (interfaz) para el almacén de pacientes y médicos.

    Invariante: no hay dos personas con el mismo documento, sea cual sea su rol.
    """

    @abstractmethod
    def listar_medicos(self) -> Sequence[Medico]:
        """Devuelve todos los médicos (sin aplicar el filtro activo)."""
        raise NotImplementedError

    @abstractmethod
    def listar_pacientes(self) -> Sequence[Paciente]:
        """Devuelve todos los pacientes (sin aplicar el filtro activo)."""
        raise NotImplementedError

    @abstractmethod
    def existe_persona(self, persona: Persona) -> bool:
        """True si alguna persona guardada tiene la misma identidad que `persona`."""
        raise NotImplementedError

    @abstractmethod
    def reemplazar(self, original: Persona, editada: Persona) -> None:
        """Sustituye `original` por `editada` en un único paso."""
        raise NotImplementedError

    @abstractmethod
    def aplicar_filtro(self, predicado: PredicadoPersona) -> None:
        """Cambia el filtro del listado visible. No modifica datos."""
        raise NotImplementedError

    def operacion_atomica(self) -> AbstractContextManager:
        """
        Sección crítica para secuencias buscar-validar-guardar.

        Por defecto no bloquea nada: sirve para repositorios de un solo hilo.
        """
        return nullcontext()
