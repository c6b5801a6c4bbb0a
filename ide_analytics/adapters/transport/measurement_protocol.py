"""Google Analytics Measurement Protocol transport.

Each event becomes one form-encoded page-view hit on a virtual page
``/virtual/<category>/<action>``, with the metadata rendered into the page
title. Hits are posted from a small worker pool so ``ping()`` never waits on
the network. There is no retry. ``qt`` carries the time between ping and
post, so the backend records the hit at ping time.
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Optional

import httpx

from ide_analytics.core.config import UsageTrackerSettings
from ide_analytics.core.events import TrackingEvent
from ide_analytics.core.exceptions import InvalidArgumentError
from ide_analytics.core.logging import logger

PROTOCOL_VERSION = "1"
HIT_TYPE = "pageview"
MAX_POST_WORKERS = 4

# Parameters identical for every hit.
# cd21: user signed in, cd16: internal user, cd17: user type
_STANDARD_PARAMS: dict[str, str] = {
    "v": PROTOCOL_VERSION,
    "t": HIT_TYPE,
    "ni": "0",
    "cd21": "1",
    "cd16": "0",
    "cd17": "0",
}


class MeasurementProtocolTransport:
    """AnalyticsTransport posting Measurement Protocol v1 hits with httpx.

    Attributes:
        url: Collection endpoint the hits are posted to.
    """

    def __init__(
        self,
        settings: UsageTrackerSettings,
        client: Optional[httpx.Client] = None,
        blocking: bool = False,
    ) -> None:
        """Configure the transport from settings.

        Args:
            settings: Tracking settings. ANALYTICS_ID is required.
            client: HTTP client to reuse. If omitted, the transport creates
                its own and closes it on close().
            blocking: Post inline instead of on the worker pool.

        Raises:
            InvalidArgumentError: If ANALYTICS_ID is not configured.
        """
        if not settings.ANALYTICS_ID:
            raise InvalidArgumentError(
                "ANALYTICS_ID is required for the Measurement Protocol transport"
            )

        self.url = settings.ANALYTICS_URL
        self._analytics_id = settings.ANALYTICS_ID
        self._client_id = settings.CLIENT_ID
        self._page_host = settings.PAGE_HOST
        self._category = settings.event_category
        self._user_agent = settings.user_agent
        self._timeout = settings.REQUEST_TIMEOUT_SECONDS

        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=self._timeout)
        self._blocking = blocking
        self._executor: Optional[ThreadPoolExecutor] = None
        self._closed = False
        self._lock = threading.Lock()
        self._logger = logger.with_prefix("[MeasurementProtocol] ")

    def build_payload(
        self, event: TrackingEvent, now: Optional[datetime] = None
    ) -> dict[str, str]:
        """Return the form fields for one hit.

        Args:
            event: The pinged event.
            now: Post time used for the ``qt`` queue time. Defaults to the
                current UTC time.
        """
        now = now or datetime.now(timezone.utc)
        queue_time_ms = max(0, int((now - event.timestamp).total_seconds() * 1000))

        payload = dict(_STANDARD_PARAMS)
        payload.update(
            {
                "tid": self._analytics_id,
                "cid": self._client_id,
                "dh": self._page_host,
                "dp": f"/virtual/{self._category}/{event.action}",
                "cd19": self._category,
                "cd20": event.action,
                "qt": str(queue_time_ms),
            }
        )
        metadata = event.metadata_string()
        if metadata:
            payload["dt"] = metadata
        return payload

    def send(self, event: TrackingEvent) -> None:
        """Post the hit on the worker pool, or inline when blocking."""
        if self._blocking:
            if self._closed:
                self._logger.debug("Transport closed, dropping event '%s'", event.action)
                return
            self._post(event)
            return

        with self._lock:
            if self._closed:
                self._logger.debug("Transport closed, dropping event '%s'", event.action)
                return
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=MAX_POST_WORKERS, thread_name_prefix="ide-analytics-ping"
                )
            self._executor.submit(self._post, event)

    def _post(self, event: TrackingEvent) -> None:
        action = event.action
        try:
            response = self._client.post(
                self.url,
                data=self.build_payload(event),
                headers={"User-Agent": self._user_agent},
                timeout=self._timeout,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            self._logger.warning(
                "Analytics endpoint rejected event '%s' with status %s",
                action,
                e.response.status_code,
            )
        except httpx.HTTPError as e:
            self._logger.warning("Failed to post event '%s': %s", action, e)
        except Exception as e:
            self._logger.error("Unexpected error posting event '%s': %s", action, e)
        else:
            self._logger.debug("Posted event '%s'", action)

    def close(self) -> None:
        """Stop accepting events, flush in-flight posts, close the owned client."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            executor = self._executor

        if executor is not None:
            executor.shutdown(wait=True)
        if self._owns_client:
            self._client.close()
