"""HTTP client for the hosting provider's VPS control API."""

from __future__ import annotations

from typing import Any

import requests

HOST = "https://api.64clouds.com/v1/"
DEFAULT_TIMEOUT = 30.0


class ApiError(Exception):
    """The API could not be reached or answered with an error status."""


def build_url(call: str, veid: str, api_key: str) -> str:
    """Return the request URL for an API call on one server."""
    return f"{HOST}{call}?veid={veid}&api_key={api_key}"


class BwhClient:
    """Issues API calls for servers identified by VEID and API key."""

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def _call(self, call: str, veid: str, api_key: str) -> dict[str, Any]:
        url = build_url(call, veid, api_key)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise ApiError(f"unable to access, please check network: {exc}") from exc
        if response.status_code != 200:
            raise ApiError(
                f"unable to access, please check network (HTTP {response.status_code})"
            )
        try:
            payload = response.json()
        except ValueError:
            return {}
        return payload if isinstance(payload, dict) else {}

    def get_live_service_info(self, veid: str, api_key: str) -> dict[str, Any]:
        """Fetch the live service information as a decoded JSON object."""
        return self._call("getLiveServiceInfo", veid, api_key)

    def start(self, veid: str, api_key: str) -> dict[str, Any]:
        """Ask the server to start."""
        return self._call("start", veid, api_key)

    def stop(self, veid: str, api_key: str) -> dict[str, Any]:
        """Ask the server to stop."""
        return self._call("stop", veid, api_key)

    def restart(self, veid: str, api_key: str) -> dict[str, Any]:
        """Ask the server to restart."""
        return self._call("restart", veid, api_key)

    def kill(self, veid: str, api_key: str) -> dict[str, Any]:
        """Force the server to stop."""
        return self._call("kill", veid, api_key)