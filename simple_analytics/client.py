"""
Report client for the Google Analytics Core Reporting API (v3).

This module authenticates a service account, validates report query
properties and retrieves the resulting table of rows.
"""
import logging
import os
from typing import Any, Dict, List, Mapping, Optional

import requests

from . import auth, config
from .errors import NotSuccessfulResponseError
from .models import ReportResult
from .query import check_properties, query_string

logger = logging.getLogger(__name__)

API_URL = "https://www.googleapis.com/analytics/v3/data/ga"


class ReportClient:
    """Handles authentication and report retrieval for one service account."""

    def __init__(self, identity: str, key_path: str, options: Optional[Dict[str, Any]] = None):
        self._identity = identity
        self._key_path = key_path
        # Reserved; no option is interpreted yet.
        self.options = dict(options or {})
        self.auth_token: Optional[str] = None
        self.result: Optional[ReportResult] = None

    @property
    def identity(self) -> str:
        return self._identity

    @property
    def key_path(self) -> str:
        return self._key_path

    @property
    def body(self) -> Optional[Dict[str, Any]]:
        """Decoded body of the last successful fetch."""
        return self.result.body if self.result is not None else None

    @property
    def rows(self) -> Optional[List[List[str]]]:
        """Rows of the last successful fetch, one list of cell strings per row."""
        return self.result.rows if self.result is not None else None

    def authenticate(self) -> str:
        """Request a token for our service account and keep it for later fetches."""
        self.auth_token = auth.fetch_access_token(self._identity, self._key_path)
        return self.auth_token

    def fetch(self, properties: Mapping[Any, Any]) -> ReportResult:
        """
        Run a report query.

        Args:
            properties: Query parameters; must include ids, start-date,
                end-date and metrics

        Returns:
            ReportResult with the decoded body and its rows

        Raises:
            InvalidPropertiesError: a required property is missing
            NotSuccessfulResponseError: the API answered with a non-200 status
        """
        check_properties(properties)

        query = query_string(properties)
        logger.debug(f"Fetching report: {query}")

        response = requests.get(
            f"{API_URL}?{query}&access_token={self.auth_token}",
            headers={"GData-Version": "3"},
            timeout=config.get_request_timeout(),
        )
        if response.status_code != 200:
            raise NotSuccessfulResponseError(response.text, status_code=response.status_code)

        body = response.json()
        result = ReportResult(body=body, rows=body.get("rows") or [])
        self.result = result

        logger.info(f"Fetched {len(result.rows)} rows for {properties.get('ids')}")
        return result


def authenticate(identity: str, key_path: str, options: Optional[Dict[str, Any]] = None) -> ReportClient:
    """Build a ReportClient and authenticate it in one call."""
    client = ReportClient(identity, key_path, options)
    client.authenticate()
    return client


def from_env(options: Optional[Dict[str, Any]] = None) -> ReportClient:
    """
    Build an authenticated ReportClient from environment variables.

    Reads GA_SERVICE_ACCOUNT_EMAIL and GOOGLE_APPLICATION_CREDENTIALS
    (a .env file is honoured).
    """
    identity = config.get_service_account_email()
    if not identity:
        raise ValueError(f"{config.SERVICE_ACCOUNT_EMAIL_VAR} environment variable not set")

    key_path = config.get_credentials_path()
    if not key_path:
        raise ValueError(f"{config.CREDENTIALS_PATH_VAR} environment variable not set")

    if not os.path.exists(key_path):
        raise FileNotFoundError(f"Credentials file not found at: {key_path}")

    logger.info(f"Loading service account key from: {key_path}")
    return authenticate(identity, key_path, options)
