"""HTTP client for the prescriptions endpoints."""

import requests


class PrescriptionsAPI:
    """Thin wrapper over the JSON API.

    *session* is anything with ``get``/``post`` like :class:`requests.Session`;
    responses must offer ``raise_for_status`` and ``json``.
    """

    def __init__(self, base_url, session=None, timeout=10):
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.timeout = timeout

    def _url(self, path):
        return f'{self.base_url}{path}'

    def _get(self, path):
        response = self.session.get(self._url(path), timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def get_users(self):
        return self._get('/user')

    def get_populated_users(self):
        return self._get('/populateduser')

    def get_prescriptions(self, user_id):
        return self._get(f'/user/{user_id}/healthlogs')

    def save_log(self, payload, user_id=None):
        """POST a health log; returns the updated user."""
        body = dict(payload)
        if user_id is not None:
            body['user_id'] = user_id
        response = self.session.post(self._url('/submit'), json=body, timeout=self.timeout)
        response.raise_for_status()
        return response.json()
