#!/usr/bin/env python3
"""
Data Fetcher Module for Pocket List Tool
Sends a single list request to the Pocket API and returns the raw reply.
"""

import logging
from typing import Dict, Optional, Tuple
import requests
from requests import Session

from models import (
    ArticleQuery,
    HTTPStatusError,
    ResponseDecodeError,
    TransportError,
)

logger = logging.getLogger(__name__)

POCKET_GET_URL = "https://getpocket.com/v3/get"

HEADERS = {"Content-Type": "application/json"}


def create_session() -> Session:
    return requests.Session()


def send(
    session: Session,
    endpoint: str,
    body: bytes,
    headers: Optional[Dict[str, str]] = None,
    method: str = "POST",
    timeout: float = 30,
) -> Tuple[int, bytes]:
    """
    Perform one HTTP request, with no retry.

    Returns:
        (status code, raw response body)
    """
    try:
        response = session.request(
            method,
            endpoint,
            data=body,
            headers=headers if headers is not None else HEADERS,
            timeout=timeout,
        )
    except requests.exceptions.RequestException as e:
        raise TransportError(f"Request to {endpoint} failed: {e}") from e
    return response.status_code, response.content


class PocketListFetcher:
    """Fetches the article list for one query from the Pocket API."""

    def __init__(self, session: Session, endpoint: str = POCKET_GET_URL):
        self.session = session
        self.endpoint = endpoint

    def get(self, query: ArticleQuery) -> bytes:
        """
        Send the query and return the raw response body.

        Args:
            query: Request payload to send

        Returns:
            Response body exactly as received, checked to be valid UTF-8

        Raises:
            RequestSerializationError: query could not be encoded
            TransportError: network, DNS or TLS failure
            HTTPStatusError: Pocket answered with a non-2xx status
            ResponseDecodeError: body is not valid UTF-8
        """
        body = query.to_json().encode("utf-8")
        logger.debug(f"POST {self.endpoint} with {query.describe()}")

        status_code, raw = send(self.session, self.endpoint, body, headers=HEADERS)
        logger.debug(f"Pocket API answered {status_code} ({len(raw)} bytes)")

        if not 200 <= status_code < 300:
            raise HTTPStatusError(status_code)

        try:
            raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ResponseDecodeError(f"Response is not valid UTF-8: {e}") from e
        return raw
