from dataclasses import dataclass

from catalog_api.core.services import DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
