"""
Main Gerrit client.

This module provides the GerritClient class, the primary entry point. It
wires settings, the HTTP client and the REST transport together and exposes
the groups facade.
"""

from typing import Dict, Optional
import logging

from gerrit_groups.config import GerritSettings, get_gerrit_settings
from gerrit_groups.groups import Groups, GroupsApi
from gerrit_groups.http import HTTPClient
from gerrit_groups.transport import RestGroupsTransport

logger = logging.getLogger(__name__)


class GerritClient:
    """
    Client for the Gerrit REST API.

    Example usage:
        ```python
        with GerritClient(base_url="https://review.example.org", username="admin", password="secret") as client:
            group = client.groups.create("reviewers")
            for info in client.groups.list().with_owned(True).get():
                print(info.name, info.id)
        ```

    Without arguments the connection settings come from ``GERRIT_*``
    environment variables.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        username: Optional[str] = None,
        password: Optional[str] = None,
        timeout: Optional[float] = None,
        headers: Optional[Dict[str, str]] = None,
        settings: Optional[GerritSettings] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Server URL; overrides ``settings.url``
            username: Username for basic authentication; overrides settings
            password: HTTP password; overrides settings
            timeout: Request timeout in seconds; overrides settings
            headers: Additional headers to include in all requests
            settings: Settings to start from (defaults to the environment)
        """
        settings = settings or get_gerrit_settings()
        self._base_url = (base_url or settings.url).rstrip("/")
        self._http = HTTPClient(
            base_url=self._base_url,
            username=username if username is not None else settings.username,
            password=password if password is not None else settings.password,
            timeout=timeout if timeout is not None else settings.timeout,
            headers=headers,
        )
        self._transport = RestGroupsTransport(self._http)
        self._groups: Optional[Groups] = None

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def http(self) -> HTTPClient:
        """Get the underlying HTTP client for custom requests."""
        return self._http

    @property
    def groups(self) -> Groups:
        """Groups facade (created on first access)."""
        if self._groups is None:
            self._groups = GroupsApi(self._transport)
        return self._groups

    def close(self) -> None:
        """Close the client and release resources."""
        self._http.close()
        logger.info(f"Closed client for {self._base_url}")

    def __enter__(self) -> "GerritClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"GerritClient(base_url={self._base_url!r}, authenticated={self._http.is_authenticated})"
