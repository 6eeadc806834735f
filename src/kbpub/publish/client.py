"""HTTP client for the remote pattern catalog"""

import logging
from types import TracebackType

import httpx

from kbpub.config import PublishConfig
from kbpub.core.models import PublishPayload, Record


logger = logging.getLogger(__name__)


class PublishError(RuntimeError):
    """The catalog could not be reached; the run stops."""


def build_payload(record: Record, catalog: str) -> PublishPayload:
    """Wrap a record in the catalog envelope, preferring 'what_it_is' as summary."""
    return PublishPayload(
        uid=record.get('slug', ''),
        title=record.get('title', ''),
        summary=record.get('what_it_is') or record.get('markdown', ''),
        catalog=catalog,
        properties=dict(record),
    )


class CatalogClient:
    """Posts records to {api_url}/api/patterns one request at a time.

    Usage:
        with CatalogClient(settings.publish_config()) as client:
            status = client.publish(record)
    """

    def __init__(self, config: PublishConfig, transport: httpx.BaseTransport = None) -> None:
        self.config = config
        self._http_client = httpx.Client(
            timeout=config.timeout,
            headers={
                'Content-Type': 'application/json',
                'x-api-key': config.api_key,
            },
            transport=transport,
        )

    def __enter__(self) -> "CatalogClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close HTTP client and release resources."""
        self._http_client.close()

    def publish(self, record: Record) -> int:
        """POST one record and return the response status code.

        Non-2xx responses are logged and returned; transport failures
        raise PublishError.
        """
        payload = build_payload(record, self.config.catalog)
        try:
            response = self._http_client.post(self.config.endpoint, content=payload.model_dump_json())
        except httpx.TransportError as e:
            raise PublishError(f"Failed to publish {payload.uid}: {e}") from e

        if response.is_success:
            logger.debug("Catalog accepted %s (HTTP %s)", payload.uid, response.status_code)
        else:
            logger.warning("Catalog rejected %s (HTTP %s)", payload.uid, response.status_code)
        return response.status_code
