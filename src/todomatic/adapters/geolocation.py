"""HTTP location provider.

Position comes from an IP geolocation endpoint; addresses come from a
Nominatim-compatible reverse geocoder.
"""

from __future__ import annotations

import httpx

from todomatic.adapters.permissions import PermissionGate
from todomatic.models import AddressComponents, Coordinates, PermissionStatus
from todomatic.models.config_models import LocationConfig
from todomatic.repositories import LocationProvider


def _first(mapping: dict, *keys: str) -> str | None:
    for key in keys:
        value = mapping.get(key)
        if value:
            return value
    return None


class HttpLocationProvider(LocationProvider):
    """LocationProvider backed by web geolocation services."""

    def __init__(
        self,
        config: LocationConfig,
        permissions: PermissionGate,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config
        self.permissions = permissions
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.config.timeout,
            headers={"User-Agent": self.config.user_agent, "Accept": "application/json"},
            follow_redirects=True,
            transport=self._transport,
        )

    async def request_permission(self) -> PermissionStatus:
        return await self.permissions.request("location")

    async def get_current_position(self) -> Coordinates:
        async with self._client() as client:
            response = await client.get(self.config.position_url)
            response.raise_for_status()
            data = response.json()

        latitude = data.get("latitude", data.get("lat"))
        longitude = data.get("longitude", data.get("lon"))
        if latitude is None or longitude is None:
            raise ValueError("position response has no coordinates")
        return Coordinates(latitude=float(latitude), longitude=float(longitude))

    async def reverse_geocode(self, coordinates: Coordinates) -> AddressComponents | None:
        params = {
            "format": "jsonv2",
            "lat": coordinates.latitude,
            "lon": coordinates.longitude,
            "addressdetails": 1,
        }
        async with self._client() as client:
            response = await client.get(self.config.reverse_geocode_url, params=params)
            response.raise_for_status()
            data = response.json()

        if "error" in data:
            return None
        address = data.get("address") or {}
        return AddressComponents(
            name=data.get("name") or None,
            street=_first(address, "road", "pedestrian", "footway"),
            district=_first(address, "suburb", "city_district", "neighbourhood"),
            city=_first(address, "city", "town", "village"),
            region=_first(address, "state", "region"),
            country=_first(address, "country"),
        )
