"""
API Client Module

HTTP client for the Fanart.tv movie webservice. Builds the request URL
from typed selectors and returns the raw response body.
"""

import logging
from typing import Optional
from dataclasses import dataclass, field

import httpx

from ..config import config
from .types import (
    ImageCategory,
    ResponseFormat,
    ResultLimit,
    SortOrder,
    category_token,
    format_token,
    limit_ordinal,
    sort_ordinal,
)


logger = logging.getLogger(__name__)


class TransportError(RuntimeError):
    """Raised when the HTTP exchange with the service fails for any reason."""

    def __init__(self, url: str, cause: Exception):
        super().__init__(f"Request to {url} failed: {cause}")
        self.url = url
        self.cause = cause


@dataclass(frozen=True)
class FanartClient:
    """
    Client for the Fanart.tv movie webservice.

    The API key and response format are fixed at construction. Each
    fetch opens its own connection, so one instance can be shared
    between threads.
    """
    api_key: str
    response_format: ResponseFormat
    timeout: Optional[float] = None
    transport: Optional[httpx.BaseTransport] = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        logger.debug(
            f"FanartClient initialized (base_url: {config.api.base_url}, "
            f"format: {format_token(self.response_format)})"
        )

    def build_url(
        self,
        movie_id: str,
        category: ImageCategory = ImageCategory.ALL,
        sort: SortOrder = SortOrder.MOST_POPULAR_THEN_NEWEST,
        limit: ResultLimit = ResultLimit.ALL
    ) -> str:
        """
        Compose the request URL for a movie.

        The default selector combination uses the short plain template;
        anything else uses the full template, which carries the format
        token twice and no movie id. The full shape matches the documented
        wire example (KEY123/php/movieart/2/1/php/); the movie id is left
        out on purpose, so do not add it back without changing that contract.

        Args:
            movie_id: Movie identifier, substituted verbatim.
            category: Artwork category filter.
            sort: Result ordering.
            limit: Number of results.

        Returns:
            Absolute URL string.
        """
        fmt = format_token(self.response_format)

        if (category == ImageCategory.ALL
                and sort == SortOrder.MOST_POPULAR_THEN_NEWEST
                and limit == ResultLimit.ALL):
            path = config.api.plain_path_template.format(
                api_key=self.api_key,
                movie_id=movie_id,
                format=fmt
            )
        else:
            path = config.api.full_path_template.format(
                api_key=self.api_key,
                movie_id=movie_id,
                format=fmt,
                category=category_token(category),
                sort=sort_ordinal(sort),
                limit=limit_ordinal(limit)
            )

        return f"{config.api.base_url}{path}"

    def fetch_by_movie_id(
        self,
        movie_id: str,
        category: ImageCategory = ImageCategory.ALL,
        sort: SortOrder = SortOrder.MOST_POPULAR_THEN_NEWEST,
        limit: ResultLimit = ResultLimit.ALL
    ) -> str:
        """
        Fetch artwork data for a movie.

        Args:
            movie_id: Movie identifier (e.g. an IMDB id).
            category: Artwork category filter.
            sort: Result ordering.
            limit: Number of results.

        Returns:
            The response body exactly as the service sent it.

        Raises:
            TransportError: On connection failure, timeout or a non-2xx final
                status. Redirects are followed first.
        """
        url = self.build_url(movie_id, category, sort, limit)
        logger.info(f"Fetching artwork for {movie_id}")
        logger.debug(f"GET {url}")

        try:
            return self._download(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Request failed for {movie_id}: {e}")
            raise TransportError(url, e) from e

    def _download(self, url: str) -> str:
        """Perform a single GET and return the body text."""
        timeout = self.timeout if self.timeout is not None else config.api.timeout_seconds
        headers = {"User-Agent": config.api.user_agent}

        with httpx.Client(
            timeout=timeout,
            headers=headers,
            transport=self.transport,
            follow_redirects=True
        ) as client:
            response = client.get(url)
            response.raise_for_status()

            logger.debug(f"Received {len(response.content)} bytes (status {response.status_code})")
            return response.text
