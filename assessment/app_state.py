# assessment/app_state.py
import logging
from assessment.api_client import PsychometricApiClient

logger = logging.getLogger(__name__)


class AppState:
    """Signed-in user and the API client, handed to whatever needs them."""

    def __init__(self, client=None):
        self.client = client or PsychometricApiClient()
        self._user_id = None
        self._profile = {}

    @property
    def user_id(self):
        return self._user_id

    @property
    def profile(self):
        return dict(self._profile)

    def is_authenticated(self):
        return self._user_id is not None

    def sign_in(self, name, email):
        data = self.client.create_user(name, email) or {}
        self.set_user(data.get('userId'), {'name': name, 'email': email})
        return self._user_id

    def set_user(self, user_id, profile=None):
        self._user_id = user_id
        self._profile = dict(profile or {})
        logger.info(f"👤 Signed in as {user_id}")

    def sign_out(self):
        self._user_id = None
        self._profile = {}
        self.client.session.cookies.clear()
