# assessment/api_client.py
import logging
import requests
from config import Config
from questions.sections import SECTION_SLUGS, get_section
from assessment.errors import (
    AuthenticationError, NetworkError, ValidationRejectedError,
    ServerError, NotFoundError,
)

logger = logging.getLogger(__name__)


class PsychometricApiClient:
    """
    Thin JSON client for the psychometric backend.

    The ``requests.Session`` keeps the login cookie between calls; every call
    is bounded by ``timeout`` seconds. Responses use the
    ``{success, data, message}`` envelope and ``data`` is returned.
    """

    def __init__(self, base_url=None, timeout=None, session=None):
        self.base_url = (base_url or Config.API_BASE_URL).rstrip('/')
        self.timeout = timeout if timeout is not None else Config.REQUEST_TIMEOUT_SECONDS
        self.session = session or requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})

    def _url(self, path):
        return f"{self.base_url}/{path.lstrip('/')}"

    def _request(self, method, path, payload=None, params=None):
        try:
            response = self.session.request(
                method, self._url(path), json=payload, params=params, timeout=self.timeout
            )
        except (requests.ConnectionError, requests.Timeout) as e:
            raise NetworkError(f"{method} {path} failed: {e}") from e
        except requests.RequestException as e:
            raise ServerError(f"{method} {path} failed: {e}") from e

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}
        message = body.get('message') or f"HTTP {response.status_code}"
        status = response.status_code

        if status in (401, 403):
            raise AuthenticationError(message, status)
        if status == 404:
            raise NotFoundError(message, status)
        if status in (400, 422):
            raise ValidationRejectedError(message, status, body.get('errors'))
        if status >= 400 or not body.get('success', False):
            raise ServerError(message, status, body.get('errors'))

        return body.get('data')

    # -------------------------
    # Users
    # -------------------------
    def create_user(self, name, email):
        return self._request('POST', '/user/create', {"name": name, "email": email})

    def get_profile(self):
        return self._request('GET', '/user/me')

    # -------------------------
    # Tests
    # -------------------------
    def get_or_create_test(self):
        return self._request('GET', '/psychometric/test')

    def save_progress(self, section, responses, current_question_index):
        section = get_section(section)
        return self._request('POST', '/psychometric/save-progress', {
            "sectionType": section.name,
            "responses": responses,
            "currentQuestionIndex": current_question_index,
        })

    def get_progress(self, section):
        return self._request('GET', f"/psychometric/progress/{get_section(section).name}")

    def submit_section_results(self, section, responses, time_spent_minutes):
        section = get_section(section)
        return self._request('POST', f"/psychometric/{SECTION_SLUGS[section.name]}", {
            "responses": responses,
            "timeSpent": time_spent_minutes,
        })

    def validate_section(self, section, responses):
        return self._request('POST', '/psychometric/validate-section', {
            "sectionType": get_section(section).name,
            "responses": responses,
        })

    def get_test_results(self, test_id=None):
        path = f"/psychometric/results/{test_id}" if test_id else '/psychometric/results'
        return self._request('GET', path)

    def get_test_history(self, limit=None):
        params = {"limit": limit} if limit else None
        return self._request('GET', '/psychometric/history', params=params)

    def delete_test(self, test_id):
        return self._request('DELETE', f"/psychometric/test/{test_id}")

    def check_section_access(self, section):
        return self._request('GET', f"/psychometric/section-access/{get_section(section).name}")

    def get_career_recommendations(self, holland_code):
        return self._request('GET', f"/psychometric/career-recommendations/{holland_code}")

    def close(self):
        self.session.close()
