"""
Client for the npm status page (https://status.npmjs.org).

The JSON operations return the status API payload untouched. `incident`
reads the public incident page instead, since the API has no per-incident
detail endpoint.
"""

from __future__ import annotations

import logging
from typing import Any

from npm_utilities.core.config import get_config
from npm_utilities.core.errors import InvalidArgument, MonitorUnavailable
from npm_utilities.core.scraping.document import FetchMode, fetch
from npm_utilities.extractors.incident_page import Incident, extract_incident

logger = logging.getLogger(__name__)


async def _api(path: str) -> Any:
    url = f"{get_config().endpoints.status}api/v2/{path}"
    try:
        return await fetch(url, FetchMode.JSON)
    except Exception as e:
        logger.warning("Status request %s failed: %r", url, e)
        raise MonitorUnavailable("The npm status page could not be reached.") from None


class StatusMonitor:
    """Read-only access to the npm status page. All operations are static."""

    @staticmethod
    async def overall() -> Any:
        """Overall status indicator."""
        return await _api("status.json")

    @staticmethod
    async def summary() -> Any:
        """Status indicator, component statuses, unresolved incidents and
        upcoming or in-progress scheduled maintenances."""
        return await _api("summary.json")

    @staticmethod
    async def components() -> Any:
        """Components with their status: operational, degraded_performance,
        partial_outage or major_outage."""
        return await _api("components.json")

    @staticmethod
    async def unresolved_incidents() -> Any:
        """Incidents in the Investigating, Identified or Monitoring state."""
        return await _api("incidents/unresolved.json")

    @staticmethod
    async def incidents() -> Any:
        """The 50 most recent incidents, resolved ones included."""
        return await _api("incidents.json")

    @staticmethod
    async def scheduled_maintenances() -> Any:
        return await _api("scheduled-maintenances.json")

    @staticmethod
    async def upcoming_scheduled_maintenances() -> Any:
        """Maintenances still in the Scheduled state."""
        return await _api("scheduled-maintenances/upcoming.json")

    @staticmethod
    async def active_scheduled_maintenances() -> Any:
        """Maintenances In Progress or Verifying."""
        return await _api("scheduled-maintenances/active.json")

    @staticmethod
    async def incident(uuid: str) -> Incident:
        """Headline and timestamped updates of one incident."""
        if not uuid:
            raise InvalidArgument("An incident UUID is required.")
        url = f"{get_config().endpoints.status}incidents/{uuid}"
        try:
            soup = await fetch(url)
            return extract_incident(soup)
        except Exception as e:
            logger.warning("Incident %s could not be read: %r", uuid, e)
            raise MonitorUnavailable(f"Incident {uuid} could not be retrieved.") from None
