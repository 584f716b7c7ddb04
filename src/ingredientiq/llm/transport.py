"""HTTP transport decorator adding OpenRouter attribution headers.

Wraps any httpx transport. Only headers are touched: the method, URL and
body of the request pass through unchanged.
"""

import httpx

JSON_CONTENT_TYPE = "application/json"
DEFAULT_REFERER = "https://github.com/alexpolus/IngredientIQ"
DEFAULT_TITLE = "IngredientIQ"


def apply_attribution_headers(
    request: httpx.Request,
    referer: str = DEFAULT_REFERER,
    title: str = DEFAULT_TITLE,
) -> httpx.Request:
    """Set attribution headers and a default content type in place.

    Existing Content-Type headers are kept. HTTP-Referer and X-Title are
    replaced rather than appended, so repeated application is a no-op.
    """
    if "content-type" not in request.headers:
        request.headers["Content-Type"] = JSON_CONTENT_TYPE
    request.headers["HTTP-Referer"] = referer
    request.headers["X-Title"] = title
    return request


class AttributionTransport(httpx.BaseTransport, httpx.AsyncBaseTransport):
    """Transport that decorates every request before delegating.

    Usable with both httpx.Client and httpx.AsyncClient. The sync and async
    paths keep separate inner transports; a mode the given transport does
    not support falls back to the httpx default, created on first use.
    """

    def __init__(
        self,
        transport: httpx.BaseTransport | httpx.AsyncBaseTransport | None = None,
        referer: str = DEFAULT_REFERER,
        title: str = DEFAULT_TITLE,
    ):
        self._sync_transport = transport if isinstance(transport, httpx.BaseTransport) else None
        self._async_transport = transport if isinstance(transport, httpx.AsyncBaseTransport) else None
        self._referer = referer
        self._title = title

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        if self._sync_transport is None:
            self._sync_transport = httpx.HTTPTransport()
        apply_attribution_headers(request, self._referer, self._title)
        return self._sync_transport.handle_request(request)

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        if self._async_transport is None:
            self._async_transport = httpx.AsyncHTTPTransport()
        apply_attribution_headers(request, self._referer, self._title)
        return await self._async_transport.handle_async_request(request)

    def close(self) -> None:
        if self._sync_transport is not None:
            self._sync_transport.close()

    async def aclose(self) -> None:
        if self._async_transport is not None:
            await self._async_transport.aclose()
