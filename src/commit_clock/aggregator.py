"""Collect commit timestamps for a user across their contributed repos."""

from __future__ import annotations

import asyncio
import logging
from datetime import tzinfo
from typing import Any

from .bucketer import bucket_commits
from .errors import ApiError, AuthError, DiscoveryError, HistoryFetchError
from .github.client import GitHubClient
from .github.queries import commit_history_query, contributed_repositories_query, viewer_query
from .models import BucketCounts, RepositoryRef, Viewer

logger = logging.getLogger(__name__)


def _dig(data: Any, *keys: str) -> Any:
    """Follow *keys* through nested dicts, returning None on any gap."""
    for key in keys:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


async def fetch_viewer(client: GitHubClient) -> Viewer:
    try:
        data = await client.execute(viewer_query())
    except ApiError as e:
        raise AuthError(e) from e

    login = _dig(data, "viewer", "login")
    user_id = _dig(data, "viewer", "id")
    if not login or not user_id:
        raise AuthError("response has no viewer login/id")
    logger.info("Authenticated as %s", login)
    return Viewer(username=login, id=user_id)


async def fetch_contributed_repositories(
    client: GitHubClient, username: str
) -> list[RepositoryRef]:
    """Non-fork repositories *username* has contributed to."""
    try:
        data = await client.execute(contributed_repositories_query(username))
    except ApiError as e:
        raise DiscoveryError(e) from e

    nodes = _dig(data, "user", "repositoriesContributedTo", "nodes")
    if not isinstance(nodes, list):
        raise DiscoveryError(f"no repositories returned for {username}")

    repos = []
    for node in nodes:
        if not isinstance(node, dict) or node.get("isFork"):
            continue
        name = node.get("name")
        owner = _dig(node, "owner", "login")
        if not name or not owner:
            raise DiscoveryError(f"repository without name or owner: {node!r}")
        repos.append(RepositoryRef(name=name, owner=owner))
    logger.info("Found %d contributed repositories (forks excluded)", len(repos))
    return repos


def _commit_dates(data: dict[str, Any]) -> list[str]:
    edges = _dig(data, "repository", "defaultBranchRef", "target", "history", "edges")
    return [_dig(edge, "node", "committedDate") for edge in edges or []]


async def fetch_commit_dates(
    client: GitHubClient, viewer: Viewer, repos: list[RepositoryRef]
) -> list[list[str]]:
    """Fetch commit dates for every repo at once.

    Results keep the order of *repos*. If any request fails the whole batch
    fails and no partial results are returned.
    """
    try:
        responses = await asyncio.gather(*(
            client.execute(commit_history_query(viewer.id, repo.name, repo.owner))
            for repo in repos
        ))
    except ApiError as e:
        raise HistoryFetchError(e) from e

    dates = [_commit_dates(data) for data in responses]
    for repo, repo_dates in zip(repos, dates):
        logger.debug("%s: %d commits", repo.full_name, len(repo_dates))
    return dates


async def collect_bucket_counts(
    client: GitHubClient,
    viewer: Viewer,
    repos: list[RepositoryRef],
    tz: tzinfo | None = None,
) -> BucketCounts:
    per_repo = await fetch_commit_dates(client, viewer, repos)

    counts = BucketCounts()
    for repo_dates in per_repo:
        bucket_commits(repo_dates, tz, counts)
    logger.info("Bucketed %d commits across %d repositories", counts.total, len(repos))
    return counts
