"""Overwrite the first file of a gist with a rendered report."""

from __future__ import annotations

import logging

from .errors import ApiError, PublishReadError, PublishWriteError
from .github.client import GitHubClient
from .models import Report

logger = logging.getLogger(__name__)


async def publish_report(client: GitHubClient, gist_id: str, report: Report) -> str:
    """Rename and rewrite the gist's first file; returns its original name.

    Other files in the gist are left untouched.
    """
    try:
        gist = await client.get_gist(gist_id)
    except ApiError as e:
        raise PublishReadError(e) from e

    files = gist.get("files") if isinstance(gist, dict) else None
    if not files:
        raise PublishReadError(f"gist {gist_id} has no files")
    filename = next(iter(files))

    try:
        await client.update_gist(gist_id, {
            filename: {"filename": report.title, "content": report.content},
        })
    except ApiError as e:
        raise PublishWriteError(e) from e

    logger.info("Updated gist %s (%s -> %s)", gist_id, filename, report.title)
    return filename
