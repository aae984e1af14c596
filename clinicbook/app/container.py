from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from clinicbook.app.application.edicion_personas.usecases import EditarPersonaUseCase
from clinicbook.app.application.security import UserContext
from clinicbook.app.infrastructure.memoria.repos_personas import PersonasRepositoryMemoria


@dataclass(slots=True)
class AppContainer:
    personas_repo: PersonasRepositoryMemoria
    user_context: UserContext = field(default_factory=UserContext)

    def editar_persona(self) -> EditarPersonaUseCase:
        return EditarPersonaUseCase(repo=self.personas_repo, user_context=self.user_context)


def build_container(
    personas_repo: Optional[PersonasRepositoryMemoria] = None,
    user_context: Optional[UserContext] = None,
) -> AppContainer:
    return AppContainer(
        personas_repo=personas_repo if personas_repo is not None else PersonasRepositoryMemoria(),
        user_context=user_context or UserContext(),
    )
