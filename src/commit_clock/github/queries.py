"""GraphQL documents used by commit-clock."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

VIEWER_QUERY = """
query {
  viewer {
    login
    id
  }
}
"""

CONTRIBUTED_REPOSITORIES_QUERY = """
query ContributedRepositories($login: String!) {
  user(login: $login) {
    repositoriesContributedTo(last: 100, includeUserRepositories: true) {
      nodes {
        name
        isFork
        owner {
          login
        }
      }
    }
  }
}
"""

COMMIT_HISTORY_QUERY = """
query CommitHistory($owner: String!, $name: String!, $authorId: ID!) {
  repository(owner: $owner, name: $name) {
    defaultBranchRef {
      target {
        ... on Commit {
          history(first: 100, author: {id: $authorId}) {
            edges {
              node {
                committedDate
              }
            }
          }
        }
      }
    }
  }
}
"""


@dataclass(frozen=True)
class GraphQLQuery:
    query: str
    variables: dict[str, Any] = field(default_factory=dict)

    def to_payload(self) -> dict[str, Any]:
        return {"query": self.query, "variables": dict(self.variables)}


def _require(**values: str) -> None:
    for name, value in values.items():
        if not value:
            raise ValueError(f"{name} must be a non-empty string")


def viewer_query() -> GraphQLQuery:
    return GraphQLQuery(VIEWER_QUERY)


def contributed_repositories_query(username: str) -> GraphQLQuery:
    """Repositories *username* contributed to, forks included.

    Callers filter out forks themselves using the ``isFork`` flag.
    """
    _require(username=username)
    return GraphQLQuery(CONTRIBUTED_REPOSITORIES_QUERY, {"login": username})


def commit_history_query(user_id: str, repo_name: str, repo_owner: str) -> GraphQLQuery:
    """Commit dates on the default branch of a repo, authored by *user_id*."""
    _require(user_id=user_id, repo_name=repo_name, repo_owner=repo_owner)
    return GraphQLQuery(
        COMMIT_HISTORY_QUERY,
        {"owner": repo_owner, "name": repo_name, "authorId": user_id},
    )
