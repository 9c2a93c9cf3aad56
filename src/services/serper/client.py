from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar, runtime_checkable

import httpx
from pydantic import SecretStr, ValidationError

from common.config import config
from common.logging import get_logger
from services.serper.errors import APIError
from services.serper.schemas import (
    BaseResponse,
    ErrorEnvelope,
    ImageResponse,
    NewsResponse,
    PlacesResponse,
    Request,
    SearchResponse,
    VideoResponse,
)

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://google.serper.dev"
DEFAULT_TIMEOUT = 30.0

ResponseT = TypeVar("ResponseT", bound=BaseResponse)


@dataclass(frozen=True)
class Vertical(Generic[ResponseT]):
    """A Serper endpoint and the model its response decodes into."""

    name: str
    path: str
    response_model: type[ResponseT]


SEARCH = Vertical("search", "/search", SearchResponse)
IMAGES = Vertical("images", "/images", ImageResponse)
NEWS = Vertical("news", "/news", NewsResponse)
VIDEOS = Vertical("videos", "/videos", VideoResponse)
PLACES = Vertical("places", "/places", PlacesResponse)

VERTICALS: dict[str, Vertical] = {v.name: v for v in (SEARCH, IMAGES, NEWS, VIDEOS, PLACES)}


@runtime_checkable
class SerperClientProtocol(Protocol):
    """The operations SerperClient offers. Type against this to swap in fakes."""

    async def search(self, request: Request) -> SearchResponse: ...

    async def images(self, request: Request) -> ImageResponse: ...

    async def news(self, request: Request) -> NewsResponse: ...

    async def videos(self, request: Request) -> VideoResponse: ...

    async def places(self, request: Request) -> PlacesResponse: ...


Option = Callable[["SerperClient"], None]


def with_http_client(http_client: httpx.AsyncClient | None) -> Option:
    """Use a caller-owned httpx client as the transport. None is ignored."""

    def apply(client: "SerperClient") -> None:
        if http_client is not None:
            client._http_client = http_client

    return apply


def with_base_url(base_url: str) -> Option:
    """Point the client at another host (a proxy, a mock server). Empty values are ignored."""

    def apply(client: "SerperClient") -> None:
        if base_url:
            client._base_url = base_url

    return apply


def with_timeout(timeout: float) -> Option:
    """
    Set the timeout on the transport the client holds at this point.

    Applied after with_http_client, it changes the caller's httpx client too;
    a later with_http_client replaces the transport and the timeout with it.
    Without a caller transport, the timeout goes to the default one.
    """

    def apply(client: "SerperClient") -> None:
        if client._http_client is None:
            client._timeout = timeout
        else:
            client._http_client.timeout = httpx.Timeout(timeout)

    return apply


class SerperClient:
    """
    Async client for the Serper search API (web, images, news, videos, places).

    Every call is a single POST; nothing is retried or cached. Cancel or bound a
    call the usual asyncio way (asyncio.timeout, wait_for, task.cancel()).

    Example:
        async with SerperClient(api_key, with_timeout(10)) as client:
            result = await client.search(Request(q="company name", gl=GL_GERMANY))

    Raises (from every operation):
        APIError: Serper answered with status >= 400.
        httpx.HTTPError: the request never got a response (DNS, connect, timeout).
        pydantic.ValidationError: a success body did not match the response model.
    """

    def __init__(self, api_key: str | SecretStr, *options: Option):
        self._api_key = api_key if isinstance(api_key, SecretStr) else SecretStr(api_key)
        self._base_url = DEFAULT_BASE_URL
        self._timeout = DEFAULT_TIMEOUT
        self._http_client: httpx.AsyncClient | None = None

        for option in options:
            option(self)

        # Default transport only when no option supplied one
        self._owns_http_client = self._http_client is None
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self._timeout, follow_redirects=True)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http_client

    @classmethod
    def from_config(cls, *options: Option) -> "SerperClient":
        """Build a client from SERPER_* settings; explicit options are applied after them."""
        return cls(
            config.serper_api_key,
            with_base_url(config.serper_base_url),
            with_timeout(config.serper_timeout),
            *options,
        )

    async def search(self, request: Request) -> SearchResponse:
        return await self._execute(SEARCH, request)

    async def images(self, request: Request) -> ImageResponse:
        return await self._execute(IMAGES, request)

    async def news(self, request: Request) -> NewsResponse:
        return await self._execute(NEWS, request)

    async def videos(self, request: Request) -> VideoResponse:
        return await self._execute(VIDEOS, request)

    async def places(self, request: Request) -> PlacesResponse:
        return await self._execute(PLACES, request)

    async def aclose(self) -> None:
        """Close the default transport. A transport passed in via with_http_client is left open."""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> "SerperClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def _execute(self, vertical: Vertical[ResponseT], request: Request | None) -> ResponseT:
        url = self._base_url.rstrip("/") + vertical.path
        payload = request.to_payload() if request is not None else None
        headers = {
            "X-API-KEY": self._api_key.get_secret_value(),
            "Content-Type": "application/json",
        }

        logger.debug(f"Serper {vertical.name}: {request}")
        try:
            # post() reads the body and closes the response before returning
            response = await self._http_client.post(url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"Serper {vertical.name} request failed: {type(e).__name__}: {e}")
            raise

        if response.status_code >= 400:
            error = self._classify_error(response)
            logger.warning(f"Serper {vertical.name} rejected: {error}")
            raise error

        try:
            result = vertical.response_model.model_validate_json(response.content, strict=True)
        except ValidationError as e:
            logger.error(f"Serper {vertical.name} returned an undecodable body: {e}")
            raise

        logger.info(f"Serper {vertical.name} returned {response.status_code} (credits: {result.credits})")
        return result

    @staticmethod
    def _classify_error(response: httpx.Response) -> APIError:
        try:
            envelope = ErrorEnvelope.model_validate_json(response.content)
        except ValidationError:
            envelope = ErrorEnvelope()
        return APIError(response.status_code, envelope.message or APIError.UNKNOWN_MESSAGE)
