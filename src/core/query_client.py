import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from contracts.api_response import ApiResponse
from contracts.probe_request import ProbeRequest
from contracts.probe_result import ProbeResult
from contracts.query_kind import QueryKind
from contracts.severity import Severity
from core.errors import (
    EmptyResultError,
    ProbeError,
    RequestError,
    ResponseParseError,
    ResponseReadError,
)
from core.query_builder import build_query

logger = logging.getLogger(__name__)


class QueryClient:
    """
    Synchronous client issuing the probe's instant queries against the query API.
    """

    def __init__(self, request: ProbeRequest, client: Optional[httpx.Client] = None):
        """
        Initialize the QueryClient.

        Args:
            request (ProbeRequest): Endpoint, instance and timeout settings.
            client (httpx.Client, optional): Client to use instead of creating one.
                An injected client is not closed by this object.
        """
        self.request = request
        self._owns_client = client is None
        self.client = client or httpx.Client(timeout=request.request_timeout)

    def close(self):
        if self._owns_client:
            self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def fetch_value(self, kind: QueryKind) -> str:
        """
        Run one query and return the first series' sample value.

        Raises:
            RequestError: The request could not be sent or returned non-200.
            ResponseReadError: The response body could not be read.
            ResponseParseError: The body is not a valid query API envelope.
            EmptyResultError: The result set is empty.
        """
        query = build_query(kind, self.request)
        logger.info(f"Querying {self.request.url} with {query}")
        try:
            http_request = self.client.build_request(
                "GET", self.request.url, params={"query": query}
            )
            resp = self.client.send(
                http_request, stream=True, follow_redirects=True
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise RequestError(e) from e

        try:
            if resp.status_code != 200:
                raise RequestError(f"{resp.status_code} {resp.reason_phrase}")
            try:
                body = resp.read()
            except httpx.HTTPError as e:
                raise ResponseReadError(e) from e
        finally:
            resp.close()

        try:
            parsed = ApiResponse.model_validate_json(body)
        except ValidationError as e:
            detail = "; ".join(err["msg"] for err in e.errors())
            raise ResponseParseError(detail) from e

        if not parsed.data.result:
            raise EmptyResultError()
        value = parsed.data.result[0].sample_value()
        logger.info(f"{kind.metric_name} for {self.request.instance}: {value}")
        return value

    def probe(self, kind: QueryKind) -> ProbeResult:
        """
        Run one query and classify the outcome.

        Returns:
            ProbeResult: OK with the sample value, or CRITICAL with a diagnostic.
        """
        try:
            value = self.fetch_value(kind)
        except ProbeError as e:
            logger.error(f"Probe {kind.metric_name} failed: {e.message}")
            return ProbeResult(
                severity=Severity.CRITICAL,
                message=f"{Severity.CRITICAL.prefix}{e.message}",
            )
        return ProbeResult(severity=Severity.OK, message=value)
