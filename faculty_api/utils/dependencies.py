"""Per-request service providers for FastAPI routes.

Routes depend on ``dependencies.<name>`` instead of building services
themselves, so tests can swap a service through ``app.dependency_overrides``
keyed by the same provider function.
"""

from typing import Any, Callable, Generic, Optional, Type, TypeVar

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from faculty_api.services.base import BaseService
from faculty_api.services.teacher_service import TeacherService
from faculty_api.utils.db import get_db_session

S = TypeVar("S", bound=BaseService)


class ServiceDependency(Generic[S]):
    """Descriptor resolving to one provider function per service class.

    The provider is built once and cached, so every access returns the same
    callable and overrides registered against it stay effective.
    """

    def __init__(self, service_class: Type[S]) -> None:
        self.service_class = service_class
        self._provider: Optional[Callable[..., S]] = None

    def _build(self) -> Callable[..., S]:
        service_class = self.service_class

        def provide(db: AsyncSession = Depends(get_db_session)) -> S:
            return service_class(db)

        provide.__name__ = f"get_{service_class.__name__.lower()}"
        return provide

    def __get__(self, instance: Any, owner: type) -> Callable[..., S]:
        if self._provider is None:
            self._provider = self._build()
        return self._provider


class ServiceDependencies:
    """Providers for every service exposed to the API."""

    teacher: ServiceDependency[TeacherService] = ServiceDependency(TeacherService)


dependencies = ServiceDependencies()
