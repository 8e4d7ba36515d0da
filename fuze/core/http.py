from __future__ import annotations

from dataclasses import dataclass

import httpx

from fuze.core import config


class FetchError(Exception):
    def __init__(self, url: str, reason: str):
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


@dataclass(frozen=True)
class FetchResult:
    status: int
    body: str


def client(timeout=None, verify=True, follow_redirects=True, user_agent=None):
    return httpx.AsyncClient(
        timeout=config.timeout() if timeout is None else timeout,
        verify=verify,
        follow_redirects=follow_redirects,
        headers={"User-Agent": user_agent or config.user_agent()},
    )


async def fetch(client: httpx.AsyncClient, url: str) -> FetchResult:
    try:
        r = await client.get(url)
        return FetchResult(r.status_code, r.text)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise FetchError(url, str(e) or e.__class__.__name__) from e
