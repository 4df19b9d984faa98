"""
Package report flow.

Collects the snippet, dependencies, version log and collaborators of one
package concurrently and flattens them into a JSON-friendly dict. Runs on
Prefect, so each step gets the task-level retries the core does not have.
"""

from __future__ import annotations

import asyncio
from typing import Optional

from prefect import flow, get_run_logger

from npm_utilities.core.scraping.prefect_tasks import (
    package_collaborators_task,
    package_dependencies_task,
    package_snippet_task,
    package_versions_task,
)


def build_report(name, version, snippet, dependencies, versions, collaborators) -> dict:
    return {
        "name": name,
        "version": version,
        "snippet": snippet,
        "dependencies": {
            "normal": [p.name for p in dependencies.normal],
            "dev": [p.name for p in dependencies.dev],
        },
        "versions": [p.version for p in versions],
        "collaborators": [u.username for u in collaborators],
    }


@flow(name="npm package report")
async def package_report_flow(name: str, version: Optional[str] = None) -> dict:
    logger = get_run_logger()
    logger.info("Building report for %s%s", name, f"@{version}" if version else "")

    snippet, dependencies, versions, collaborators = await asyncio.gather(
        package_snippet_task(name, version),
        package_dependencies_task(name, version),
        package_versions_task(name),
        package_collaborators_task(name, version),
    )

    report = build_report(name, version, snippet, dependencies, versions, collaborators)
    logger.info(
        "Report for %s: %d dependencies, %d versions",
        name,
        len(report["dependencies"]["normal"]),
        len(report["versions"]),
    )
    return report


if __name__ == "__main__":
    print(asyncio.run(package_report_flow("upjson")))
