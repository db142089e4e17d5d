from dataclasses import dataclass

from src.storefront.core.services import DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
