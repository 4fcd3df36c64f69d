"""RFC 7807 problem details helpers shared by the routes."""

from typing import Any

from fastapi import HTTPException, Request

PROBLEM_TYPE_PREFIX = "urn:postservice:error:"


def problem_detail(
    request: Request, status: int, slug: str, title: str, detail: str
) -> dict[str, Any]:
    """Build an RFC 7807 problem details body.

    Args:
        request: The failing request (its path becomes ``instance``).
        status: HTTP status code.
        slug: Problem type suffix, e.g. "post-not-found".
        title: Short human-readable summary.
        detail: Explanation specific to this occurrence.
    """
    return {
        "type": f"{PROBLEM_TYPE_PREFIX}{slug}",
        "title": title,
        "status": status,
        "detail": detail,
        "instance": request.url.path,
    }


def problem(
    request: Request, status: int, slug: str, title: str, detail: str
) -> HTTPException:
    """Build an HTTPException carrying problem details."""
    return HTTPException(
        status_code=status,
        detail=problem_detail(request, status, slug, title, detail),
    )
