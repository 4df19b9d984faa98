import asyncio
import json

import pytest
import requests

from npm_utilities import InvalidArgument, MonitorUnavailable, StatusMonitor

INCIDENT_PAGE = """
<html><body>
  <div class="page-title">
    <div class="incident-name">Degraded performance of package installs</div>
    <div class="subheader">This incident has been resolved.</div>
  </div>
  <div class="row update-row">
    <div class="update-title span3 font-large">Resolved</div>
    <div class="update-container">
      <div class="update-body font-regular">This incident has been resolved.</div>
      <div class="update-timestamp font-small color-secondary">Posted Oct 01, 2019 - 14:02 UTC</div>
    </div>
  </div>
  <div class="row update-row">
    <div class="update-title span3 font-large">Investigating</div>
    <div class="update-container">
      <div class="update-body font-regular">
        We are investigating slow installs.
      </div>
      <div class="update-timestamp font-small color-secondary">Posted Oct 01, 2019 - 13:10 UTC</div>
    </div>
  </div>
</body></html>
"""

JSON_OPERATIONS = {
    "overall": "api/v2/status.json",
    "summary": "api/v2/summary.json",
    "components": "api/v2/components.json",
    "unresolved_incidents": "api/v2/incidents/unresolved.json",
    "incidents": "api/v2/incidents.json",
    "scheduled_maintenances": "api/v2/scheduled-maintenances.json",
    "upcoming_scheduled_maintenances": "api/v2/scheduled-maintenances/upcoming.json",
    "active_scheduled_maintenances": "api/v2/scheduled-maintenances/active.json",
}


@pytest.mark.parametrize("operation,path", JSON_OPERATIONS.items())
def test_json_operations_pass_payload_through(serve, operation, path):
    payload = {"status": {"indicator": "none", "description": "All Systems Operational"}}
    fake = serve(json.dumps(payload))
    result = asyncio.run(getattr(StatusMonitor, operation)())
    assert result == payload
    assert fake.calls == ["https://status.npmjs.org/" + path]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"error": requests.ConnectionError("connection refused")},
        {"status": 500},
        {"body": "<html>not json</html>"},
    ],
)
def test_json_failures_raise_monitor_unavailable(serve, kwargs):
    serve(**kwargs)
    for operation in JSON_OPERATIONS:
        with pytest.raises(MonitorUnavailable):
            asyncio.run(getattr(StatusMonitor, operation)())


def test_incident_requires_uuid(serve):
    fake = serve(INCIDENT_PAGE)
    with pytest.raises(InvalidArgument):
        asyncio.run(StatusMonitor.incident(""))
    assert fake.calls == []


def test_incident_details(serve):
    fake = serve(INCIDENT_PAGE)
    result = asyncio.run(StatusMonitor.incident("kq7fm4ts6yq1"))

    assert fake.calls == ["https://status.npmjs.org/incidents/kq7fm4ts6yq1"]
    assert result["message"] == "Degraded performance of package installs"
    assert len(result["actions"]) == 2
    assert result["actions"][0] == {
        "type": "Resolved",
        "summary": "This incident has been resolved.",
        "timestamp": "Posted Oct 01, 2019 - 14:02 UTC",
    }
    assert result["actions"][1]["summary"] == "We are investigating slow installs."
    for action in result["actions"]:
        assert action["type"] and action["summary"] and action["timestamp"]


def test_incident_failure_raises_monitor_unavailable(serve):
    serve(status=404)
    with pytest.raises(MonitorUnavailable):
        asyncio.run(StatusMonitor.incident("missing"))
