# frontend/services/auth_service.py
import logging
from typing import Dict, Optional, Tuple

from frontend.services import api_client
from frontend.services.api_client import ApiError

logger = logging.getLogger(__name__)


class AuthService:
    # ---------- LOGIN ----------
    def login(self, username: str, password: str) -> Tuple[bool, Optional[Dict], Optional[str]]:
        """(ok, user, error). On success the token is kept for every later call."""
        if not username or not password:
            return False, None, "Please enter username and password"
        try:
            result = api_client.login(username.strip(), password)
        except ApiError as e:
            return False, None, str(e)
        api_client.set_session(result["token"], result["user"])
        logger.info("Logged in as %s", result["user"].get("username"))
        return True, result["user"], None

    # ---------- LOGOUT ----------
    def logout(self) -> None:
        api_client.clear_session()

    def current_user(self) -> Optional[Dict]:
        return api_client.current_user()
