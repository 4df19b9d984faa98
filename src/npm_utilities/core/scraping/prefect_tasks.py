"""Prefect tasks wrapping the npm-utilities operations.

The core never retries. These tasks are the opt-in layer for callers that
want retries and run logs: each one is a single operation with Prefect's
`retries` / `retry_delay_seconds` configured on the task.
"""

from __future__ import annotations

from typing import Any, List, Optional

from prefect import get_run_logger, task

from npm_utilities.npm.package import Dependencies, Package
from npm_utilities.npm.status import StatusMonitor


@task(name="package_snippet", retries=2, retry_delay_seconds=3)
async def package_snippet_task(name: str, version: Optional[str] = None) -> dict:
    logger = get_run_logger()
    logger.info("Fetching snippet for %s", name)
    return await Package(name, version).snippet()


@task(name="package_dependencies", retries=2, retry_delay_seconds=3)
async def package_dependencies_task(name: str, version: Optional[str] = None) -> Dependencies:
    logger = get_run_logger()
    deps = await Package(name, version).dependencies()
    logger.info(
        "%s has %d dependencies and %d dev dependencies",
        name,
        len(deps.normal),
        len(deps.dev),
    )
    return deps


@task(name="package_versions", retries=2, retry_delay_seconds=3)
async def package_versions_task(name: str) -> List[Package]:
    logger = get_run_logger()
    versions = await Package(name).versions()
    logger.info("Found %d versions of %s", len(versions), name)
    return versions


@task(name="package_collaborators", retries=2, retry_delay_seconds=3)
async def package_collaborators_task(name: str, version: Optional[str] = None) -> list:
    logger = get_run_logger()
    users = await Package(name, version).collaborators()
    logger.info("Found %d collaborators for %s", len(users), name)
    return users


@task(name="status_summary", retries=1, retry_delay_seconds=5)
async def status_summary_task() -> Any:
    logger = get_run_logger()
    summary = await StatusMonitor.summary()
    logger.info("Fetched npm status summary")
    return summary
