"""Location acquisition workflow.

Permission, then position, then a best-effort reverse geocode. Denial and
position failures abort with distinct errors; a geocoding failure still
yields coordinates, and the address is left unset.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

from todomatic.errors import (
    GeocodeFailure,
    PermissionDenied,
    PositionUnavailable,
    TodoMaticError,
)
from todomatic.models import AddressComponents, Coordinates, LocationFix, PermissionStatus
from todomatic.repositories import LocationProvider

logger = logging.getLogger(__name__)

# Coordinate precision when no address is available
LIST_PRECISION = 4
DETAIL_PRECISION = 6

ADDRESS_FIELDS = ("name", "street", "district", "city", "region", "country")


class LocationState(str, Enum):
    IDLE = "idle"
    REQUESTING_PERMISSION = "requesting_permission"
    ACQUIRING_POSITION = "acquiring_position"
    REVERSE_GEOCODING = "reverse_geocoding"
    ATTACHED = "attached"


_LOADING_STATES = frozenset(
    {
        LocationState.REQUESTING_PERMISSION,
        LocationState.ACQUIRING_POSITION,
        LocationState.REVERSE_GEOCODING,
    }
)

StateListener = Callable[[LocationState], None]


def format_address(components: AddressComponents) -> str:
    """Join the available address parts, most specific first."""
    parts = (getattr(components, field) for field in ADDRESS_FIELDS)
    return ", ".join(part for part in parts if part)


def format_coordinates(coordinates: Coordinates, precision: int = LIST_PRECISION) -> str:
    """Render coordinates as ``"lat, lon"`` with fixed decimals."""
    return f"{coordinates.latitude:.{precision}f}, {coordinates.longitude:.{precision}f}"


def location_label(
    coordinates: Coordinates,
    formatted_address: str | None,
    precision: int = LIST_PRECISION,
) -> str:
    """The address if one was resolved, raw coordinates otherwise."""
    return formatted_address or format_coordinates(coordinates, precision)


class LocationWorkflow:
    """State machine driving one location capture at a time.

    Subscribers are told about every state change; ``loading`` is true from
    the permission request until reverse geocoding finishes.
    """

    def __init__(self, provider: LocationProvider):
        self._provider = provider
        self._state = LocationState.IDLE
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> LocationState:
        return self._state

    @property
    def loading(self) -> bool:
        return self._state in _LOADING_STATES

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    async def acquire(self) -> LocationFix:
        """Run the workflow to completion.

        Returns:
            The captured coordinates, with an address if geocoding succeeded

        Raises:
            PermissionDenied: If the user refused location access
            PositionUnavailable: If no position could be acquired
        """
        if self.loading:
            raise TodoMaticError("Location capture already in progress")

        self._transition(LocationState.REQUESTING_PERMISSION)
        try:
            status = await self._provider.request_permission()
            if status is not PermissionStatus.GRANTED:
                raise PermissionDenied(
                    "location", "Location permission is required for this feature"
                )

            self._transition(LocationState.ACQUIRING_POSITION)
            try:
                coordinates = await self._provider.get_current_position()
            except Exception as e:
                raise PositionUnavailable(f"Failed to get location: {e}") from e

            self._transition(LocationState.REVERSE_GEOCODING)
            fix = await self._resolve_address(coordinates)
        except BaseException:
            self._transition(LocationState.IDLE)
            raise

        self._transition(LocationState.ATTACHED)
        return fix

    def reset(self) -> None:
        """Return to IDLE after a fix has been consumed."""
        if not self.loading:
            self._transition(LocationState.IDLE)

    async def _resolve_address(self, coordinates: Coordinates) -> LocationFix:
        try:
            components = await self._provider.reverse_geocode(coordinates)
        except Exception as e:
            failure = GeocodeFailure(f"Reverse geocoding failed: {e}")
            logger.warning("%s", failure)
            return LocationFix(coordinates=coordinates, geocode_error=str(failure))

        if components is None:
            logger.info("no address found for %s", format_coordinates(coordinates))
            return LocationFix(coordinates=coordinates)

        return LocationFix(
            coordinates=coordinates,
            formatted_address=format_address(components) or None,
        )

    def _transition(self, state: LocationState) -> None:
        if state is self._state:
            return
        logger.debug("location workflow: %s -> %s", self._state.value, state.value)
        self._state = state
        for listener in list(self._listeners):
            listener(state)
