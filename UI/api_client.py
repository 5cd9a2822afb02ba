# UI/api_client.py
import logging
from typing import Any, Optional, Tuple

import requests

from UI.config import settings
from UI.errors import NetworkError, RequestError

logger = logging.getLogger("hrms")


class BackendClient:
    """
    Thin JSON wrapper around the HR backend.

    One attempt per call: no retry, no cancellation. Non-2xx answers raise
    RequestError (carrying the body text), transport failures raise NetworkError.

    Without an explicit session every call goes through requests.request, so the
    concurrent GETs of a panel load never share a Session between threads.
    """

    def __init__(self, base_url: str, timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = self._url(path)
        send = self.session.request if self.session is not None else requests.request
        logger.debug("%s %s", method, url)
        try:
            res = send(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            logger.warning("Backend not reachable (%s %s): %s", method, url, e)
            raise NetworkError(f"Backend not reachable: {e}") from e

        if not res.ok:
            logger.warning("%s %s -> %s %s", method, url, res.status_code, res.text)
            raise RequestError(res.text or f"HTTP {res.status_code}", status_code=res.status_code, body=res.text)
        try:
            return res.json()
        except ValueError as e:
            raise RequestError(f"Invalid JSON from {url}", status_code=res.status_code, body=res.text) from e

    def get(self, path: str) -> Any:
        return self._request("GET", path)

    def post(self, path: str, body: Any) -> Any:
        # json= serialises the body and sets Content-Type: application/json
        return self._request("POST", path, json=body)

    def check(self) -> Any:
        """Connectivity check against the backend's health route."""
        return self.get("/")


def backend_status(client: BackendClient) -> Tuple[bool, str]:
    """(reachable, message) for the "Check Backend" button; any HTTP answer counts as reachable."""
    try:
        client.check()
    except NetworkError as e:
        return False, f"Backend unreachable at {client.base_url} — {e}"
    except RequestError as e:
        return True, f"Backend reachable at {client.base_url}, HTTP {e.status_code}"
    return True, f"Backend reachable at {client.base_url}"


def get_client() -> BackendClient:
    return BackendClient(settings.BACKEND_URL, timeout=settings.BACKEND_TIMEOUT)
