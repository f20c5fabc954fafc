"""Login page state."""

from typing import Optional

from expense_client.schemas.toast import Severity
from expense_client.services.session import SessionStore
from expense_client.services.toast_service import ToastQueue
from expense_client.services.validation import LoginForm


class LoginController:
    """Validates the login form, signs in through the session and reports the outcome."""

    def __init__(self, session: SessionStore, toasts: ToastQueue):
        self.session = session
        self.toasts = toasts
        self.form = LoginForm()
        self.loading = False

    def submit(self, form: Optional[LoginForm] = None) -> bool:
        form = form if form is not None else self.form
        if not form.validate():
            return False

        self.loading = True
        try:
            result = self.session.login(form.email, form.password)
        finally:
            self.loading = False

        if result.success:
            self.toasts.add("Login successful!", Severity.success)
        else:
            self.toasts.add(result.message, Severity.error)
        return result.success
