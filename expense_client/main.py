"""
Application entry point: wires storage, API client, session and pages.
"""

import logging
from typing import Optional

import httpx
from sqlalchemy.engine import Engine

from expense_client.api.auth import AuthAPI
from expense_client.api.client import ApiClient
from expense_client.api.expenses import ExpenseAPI
from expense_client.api.profile import ProfileAPI
from expense_client.config import Settings
from expense_client.database import create_storage_engine, init_db, make_session_factory
from expense_client.services.auth_service import LoginController
from expense_client.services.dashboard_service import DashboardController
from expense_client.services.expense_service import ExpensesController
from expense_client.services.profile_service import ProfileController
from expense_client.services.session import SessionStore
from expense_client.services.storage import LocalStorage
from expense_client.services.toast_service import ToastQueue

logger = logging.getLogger(__name__)


class ExpenseTrackerApp:
    """
    Owns every store for one client instance.

    Nothing here is module-global: the session and toast queue are created
    in the constructor and handed to the pages that use them. Call
    ``start()`` before rendering any page and ``close()`` on shutdown.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        http: Optional[httpx.Client] = None,
        engine: Optional[Engine] = None
    ):
        self.settings = settings or Settings()
        self._owns_engine = engine is None
        self.engine = engine or create_storage_engine(self.settings.storage_url)
        self.db = make_session_factory(self.engine)()

        self.storage = LocalStorage(self.db)
        self.api = ApiClient(self.storage, self.settings, http=http)
        self.auth_api = AuthAPI(self.api)
        self.expense_api = ExpenseAPI(self.api)
        self.profile_api = ProfileAPI(self.api)

        self.session = SessionStore(self.storage, self.auth_api)
        self.toasts = ToastQueue(duration=self.settings.toast_duration_seconds)

        self.login = LoginController(self.session, self.toasts)
        self.dashboard = DashboardController(self.expense_api, self.toasts)
        self.expenses = ExpensesController(self.expense_api, self.toasts)
        self.profile = ProfileController(self.profile_api, self.toasts)

    def start(self) -> "ExpenseTrackerApp":
        logging.basicConfig(level=self.settings.log_level.upper())
        init_db(self.engine)
        self.session.restore()
        logger.info(f"{self.settings.app_name} started against {self.settings.api_url}")
        return self

    def close(self) -> None:
        self.toasts.clear()
        self.api.close()
        self.db.close()
        if self._owns_engine:
            self.engine.dispose()

    def __enter__(self) -> "ExpenseTrackerApp":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
