"""Profile page state."""

import logging
from typing import Any, Dict, Optional, Union

from expense_client.api.client import REQUEST_ERRORS
from expense_client.api.profile import ProfileAPI
from expense_client.schemas.toast import Severity
from expense_client.schemas.user import User, UserUpdate
from expense_client.services.toast_service import ToastQueue

logger = logging.getLogger(__name__)


class ProfileController:

    def __init__(self, profile_api: ProfileAPI, toasts: ToastQueue):
        self.profile_api = profile_api
        self.toasts = toasts
        self.profile: Optional[User] = None
        self.loading = False
        self.updating = False

    def load(self) -> Optional[User]:
        self.loading = True
        try:
            self.profile = self.profile_api.get()
        except REQUEST_ERRORS as e:
            logger.error(f"Profile error: {e}")
            self.toasts.add("Failed to load profile", Severity.error)
        finally:
            self.loading = False
        return self.profile

    def update(self, data: Union[UserUpdate, Dict[str, Any]]) -> bool:
        self.updating = True
        try:
            self.profile = self.profile_api.update(data)
        except REQUEST_ERRORS as e:
            message = getattr(e, "message", None) or "Failed to update profile"
            self.toasts.add(message, Severity.error)
            return False
        finally:
            self.updating = False

        self.toasts.add("Profile updated successfully!", Severity.success)
        return True
