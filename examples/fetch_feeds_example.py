from __future__ import annotations

import httpx

from blurnet.api import (
    APIResponse,
    BaseAPIResponse,
    ErrorMessages,
    HttpxConnection,
    NetworkSettings,
)
from blurnet.util.log import configure_logging, get_logger, shutdown_logging

FEEDS_URL = "https://www.newsblur.com/reader/feeds"


class FeedsResponse(BaseAPIResponse):
    feeds: dict[str, dict] = {}


def fetch_feeds(client: httpx.Client | None, messages: ErrorMessages) -> APIResponse:
    if client is None:
        return APIResponse.offline(messages)

    with client.stream("GET", FEEDS_URL) as response:
        return APIResponse.from_connection(messages, FEEDS_URL, HttpxConnection(response))


def main() -> None:
    configure_logging(level="DEBUG", intercept_std_logging=True)
    NetworkSettings.configure(verbose_log_net=True)
    log = get_logger("fetch_feeds_example")

    messages = ErrorMessages()
    with httpx.Client(timeout=10.0, follow_redirects=True) as client:
        result = fetch_feeds(client, messages)

    feeds = result.get_response(FeedsResponse)
    if result.is_error() or feeds.is_error():
        log.warning("Could not load feeds: {message}", message=feeds.get_error_message())
    else:
        log.info("Loaded {count} feeds in {ms} ms", count=len(feeds.feeds), ms=feeds.read_time)

    offline = fetch_feeds(None, messages)
    log.info("Offline result: {message}", message=offline.error_message)

    shutdown_logging()


if __name__ == "__main__":
    main()
