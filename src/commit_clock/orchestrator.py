"""Run the full pipeline: discover, fetch, bucket, render, publish."""

from __future__ import annotations

import logging

from .aggregator import collect_bucket_counts, fetch_contributed_repositories, fetch_viewer
from .config import Settings
from .errors import CommitClockError, EmptyReportError
from .github.client import GitHubClient
from .publisher import publish_report
from .renderer import build_report, render_json, render_preview

logger = logging.getLogger(__name__)


async def run(
    settings: Settings,
    dry_run: bool = False,
    output_format: str = "text",
    output_file: str | None = None,
) -> int:
    """Execute one run and return the process exit status.

    Any stage failure is logged and ends the run with status 1 before the
    gist is touched. An empty report is not a failure.
    """
    try:
        async with GitHubClient(settings.token) as client:
            viewer = await fetch_viewer(client)
            repos = await fetch_contributed_repositories(client, viewer.username)
            counts = await collect_bucket_counts(client, viewer, repos, settings.tzinfo)
            report = build_report(counts)

            if dry_run:
                if output_format == "json":
                    render_json(report, output_file=output_file)
                else:
                    render_preview(report, output_file=output_file)
                return 0

            await publish_report(client, settings.gist_id, report)
    except EmptyReportError:
        logger.info("No commits between 08:00 and midnight; gist left unchanged")
        return 0
    except CommitClockError as e:
        logger.error("%s", e)
        return 1
    return 0
