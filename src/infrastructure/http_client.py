"""Async HTTP client used for every platform request."""

from dataclasses import dataclass
from typing import Mapping

from curl_cffi import CurlError
from curl_cffi.requests import AsyncSession
from loguru import logger

from .errors import HTTPClientError


@dataclass(frozen=True)
class HTTPResponse:
    """Status and decoded body of an HTTP response."""

    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class AsyncHTTPClient:
    """Thin wrapper over ``curl_cffi`` sessions.

    A fresh session is opened per request so concurrent callers never share
    connection state.
    """

    def __init__(self, timeout: float = 30.0, user_agent: str | None = None):
        self.timeout = timeout
        self.headers = {"User-Agent": user_agent} if user_agent else {}

    async def get(self, url: str, cookies: Mapping[str, str] | None = None) -> HTTPResponse:
        """Issue a GET request."""
        logger.debug(f"GET {url}")
        try:
            async with AsyncSession() as session:
                response = await session.get(
                    url,
                    headers=self.headers,
                    cookies=dict(cookies or {}),
                    timeout=self.timeout,
                )
                return HTTPResponse(status_code=response.status_code, text=response.text)
        except CurlError as e:
            raise HTTPClientError(url, str(e)) from e

    async def post_form(
        self,
        url: str,
        data: Mapping[str, str],
        cookies: Mapping[str, str] | None = None,
    ) -> HTTPResponse:
        """Issue a POST request with a form-encoded body."""
        logger.debug(f"POST {url}")
        try:
            async with AsyncSession() as session:
                response = await session.post(
                    url,
                    data=dict(data),
                    headers=self.headers,
                    cookies=dict(cookies or {}),
                    timeout=self.timeout,
                )
                return HTTPResponse(status_code=response.status_code, text=response.text)
        except CurlError as e:
            raise HTTPClientError(url, str(e)) from e
