"""Map deep-link resolution with a web fallback."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable

from todomatic.errors import LaunchFailure
from todomatic.models import Coordinates
from todomatic.repositories import UriLauncher

logger = logging.getLogger(__name__)

APPLE_PLATFORMS = frozenset({"darwin", "ios"})
WEB_MAPS_URL = "https://www.google.com/maps/search/?api=1&query={lat},{lon}"


def native_uri(coordinates: Coordinates, platform: str) -> str:
    """Build the platform's native map URI for *coordinates*."""
    lat, lon = coordinates.latitude, coordinates.longitude
    if platform in APPLE_PLATFORMS:
        return f"maps:0,0?q={lat},{lon}"
    return f"geo:{lat},{lon}?q={lat},{lon}"


def web_uri(coordinates: Coordinates) -> str:
    """Build the universal web map search URL for *coordinates*."""
    return WEB_MAPS_URL.format(lat=coordinates.latitude, lon=coordinates.longitude)


class MapLinkResolver:
    """Opens coordinates in a map application, falling back to the web."""

    def __init__(self, launcher: UriLauncher, platform: str | None = None):
        self._launcher = launcher
        self.platform = platform or sys.platform

    async def open(
        self,
        coordinates: Coordinates,
        on_close: Callable[[], None] | None = None,
    ) -> str:
        """Open *coordinates* and return the URI that was launched.

        If the native map URI is openable it is launched and *on_close* is
        called to dismiss the presenting view. Otherwise the web map URL is
        opened and the view stays up.

        Raises:
            LaunchFailure: If the opener check fails, or the web fallback
                cannot be opened either
        """
        uri = native_uri(coordinates, self.platform)
        try:
            supported = await self._launcher.can_open(uri)
        except Exception as e:
            logger.error("map link check failed for %s: %s", uri, e)
            raise LaunchFailure("Unable to open map application") from e

        if supported:
            try:
                await self._launcher.open(uri)
            except Exception as e:
                logger.warning("native map launch failed for %s: %s", uri, e)
            else:
                if on_close is not None:
                    on_close()
                return uri

        fallback = web_uri(coordinates)
        try:
            await self._launcher.open(fallback)
        except Exception as e:
            logger.error("web map fallback failed for %s: %s", fallback, e)
            raise LaunchFailure("Unable to open map application") from e
        return fallback
