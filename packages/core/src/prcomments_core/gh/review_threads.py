"""GraphQL access to a pull request's review threads.

Only the first 100 threads and the first 100 comments per thread are
requested. Anything beyond that is reported through a warning, not fetched.
"""

from __future__ import annotations

import logging

import requests

from prcomments_core.errors import ApiError

logger = logging.getLogger(__name__)

REVIEW_THREADS_QUERY = """
query($owner: String!, $repo: String!, $branch: String!) {
  repository(owner: $owner, name: $repo) {
    pullRequests(first: 1, headRefName: $branch) {
      nodes {
        number
        reviewThreads(first: 100) {
          pageInfo {
            hasNextPage
          }
          nodes {
            isResolved
            comments(first: 100) {
              pageInfo {
                hasNextPage
              }
              nodes {
                id
                databaseId
                body
                createdAt
                updatedAt
                path
                position
                originalPosition
                line
                startLine
                commit {
                  oid
                }
                author {
                  login
                }
                diffHunk
              }
            }
          }
        }
      }
    }
  }
}
"""


def post_graphql(api_url: str, token: str, query: str, variables: dict, timeout: float | None = None) -> dict:
    """POST one GraphQL query and return the ``data`` object of the response.

    Raises ApiError on a non-success status or when the body carries an
    ``errors`` list. Transport and decoding errors propagate from requests.
    """
    headers = {
        "Authorization": f"bearer {token}",
        "Content-Type": "application/json",
    }
    logger.debug("POST %s variables=%s", api_url, variables)
    with requests.Session() as session:
        response = session.post(
            api_url,
            headers=headers,
            json={"query": query, "variables": variables},
            timeout=timeout,
        )
        if not response.ok:
            raise ApiError(
                f"GitHub GraphQL API request failed: {response.status_code} {response.reason}",
                status_code=response.status_code,
            )
        payload = response.json()

    if not isinstance(payload, dict):
        raise ApiError(
            f"Unexpected GraphQL response: expected a JSON object, got {type(payload).__name__}",
            status_code=response.status_code,
        )
    if payload.get("errors"):
        messages = "; ".join(e.get("message", str(e)) for e in payload["errors"])
        raise ApiError(f"GraphQL Error: {messages}", status_code=response.status_code, errors=payload["errors"])
    return payload.get("data") or {}


def get_review_threads(
    api_url: str,
    token: str,
    owner: str,
    repo: str,
    branch: str,
    timeout: float | None = None,
) -> list[dict] | None:
    """Return the raw review threads of the PR whose head branch is ``branch``.

    Returns None when no pull request exists for that branch.
    """
    data = post_graphql(
        api_url,
        token,
        REVIEW_THREADS_QUERY,
        {"owner": owner, "repo": repo, "branch": branch},
        timeout=timeout,
    )
    repository = data.get("repository")
    if repository is None:
        raise ApiError(f"Repository {owner}/{repo} not found or not accessible")

    pulls = repository["pullRequests"]["nodes"]
    if not pulls:
        return None

    pr = pulls[0]
    number = pr.get("number")
    review_threads = pr["reviewThreads"]
    threads = review_threads["nodes"]
    if review_threads.get("pageInfo", {}).get("hasNextPage"):
        logger.warning("PR #%s has more than 100 review threads; only the first 100 are shown.", number)
    for thread in threads:
        if thread["comments"].get("pageInfo", {}).get("hasNextPage"):
            logger.warning("A review thread on PR #%s has more than 100 comments; the rest are omitted.", number)
    return threads
