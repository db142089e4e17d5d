from .db_manage import DbManageService
from .db_session import DbSessionService
from .unit_of_work import unit_of_work

__all__ = ["DbManageService", "DbSessionService", "unit_of_work"]
