from __future__ import annotations

import asyncio
import enum
import time
from dataclasses import dataclass, field
from functools import partial
from typing import Awaitable, Callable, Iterable, Optional, Set

from fuze.core import config, http
from fuze.core.http import FetchError, FetchResult
from fuze.core.logging import get_logger
from .links import extract_hrefs
from .normalizer import canonical_seed, normalize

Fetch = Callable[[str], Awaitable[FetchResult]]
Extract = Callable[[str], Iterable[str]]

log = get_logger(__name__)


class CrawlState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    DONE = "done"


@dataclass(frozen=True)
class PageResult:
    url: str
    status: Optional[int]
    ok: bool
    error: Optional[str] = None
    links: int = 0


@dataclass
class CrawlReport:
    seed: str
    visited: Set[str] = field(default_factory=set)
    broken: Set[str] = field(default_factory=set)
    rounds: int = 0
    elapsed: float = 0.0


def page_links(url: str, html: str, extract: Extract = extract_hrefs) -> Set[str]:
    found = set()
    for href in extract(html):
        link = normalize(url, href)
        if link is not None:
            found.add(link)
    return found


def next_frontier(candidates: Iterable[Set[str]], visited: Set[str]) -> Set[str]:
    frontier: Set[str] = set()
    for links in candidates:
        frontier |= links
    return frontier - visited


class Crawler:
    def __init__(
        self,
        seed: str,
        fetch: Fetch,
        extract: Extract = extract_hrefs,
        on_result: Optional[Callable[[PageResult], None]] = None,
        workers: int = 1,
    ):
        self.seed = canonical_seed(seed)
        self.fetch = fetch
        self.extract = extract
        self.on_result = on_result
        self.workers = max(1, workers)
        self.state = CrawlState.IDLE
        self.visited: Set[str] = set()
        self.broken: Set[str] = set()
        self.frontier: Set[str] = {self.seed}
        self.rounds = 0
        self.elapsed = 0.0

    async def run(self) -> CrawlReport:
        if self.state is not CrawlState.IDLE:
            raise RuntimeError("a Crawler can only run once")
        self.state = CrawlState.RUNNING
        sem = asyncio.Semaphore(self.workers)
        start = time.perf_counter()
        try:
            while self.frontier:
                batch, self.frontier = self.frontier, set()
                self.rounds += 1
                log.debug("round %d: %d url(s)", self.rounds, len(batch))
                found = await asyncio.gather(*(self._visit(u, sem) for u in batch))
                self.frontier = next_frontier(found, self.visited)
        finally:
            self.elapsed = time.perf_counter() - start
        self.state = CrawlState.DONE
        return self.report()

    def report(self) -> CrawlReport:
        return CrawlReport(
            seed=self.seed,
            visited=set(self.visited),
            broken=set(self.broken),
            rounds=self.rounds,
            elapsed=self.elapsed,
        )

    async def _visit(self, url: str, sem: asyncio.Semaphore) -> Set[str]:
        async with sem:
            try:
                res = await self.fetch(url)
            except FetchError as e:
                log.warning("fetch failed for %s: %s", url, e.reason)
                self.visited.add(url)
                self.broken.add(url)
                self._emit(PageResult(url, None, False, error=e.reason))
                return set()

        self.visited.add(url)
        if res.status != 200:
            self.broken.add(url)
            self._emit(PageResult(url, res.status, False))
            return set()

        try:
            links = page_links(url, res.body, self.extract) - self.visited
        except Exception as e:
            log.warning("could not extract links from %s: %s", url, e)
            links = set()
        self._emit(PageResult(url, res.status, True, links=len(links)))
        return links

    def _emit(self, result: PageResult) -> None:
        if self.on_result is not None:
            self.on_result(result)


async def crawl(
    seed: str,
    timeout: Optional[float] = None,
    workers: Optional[int] = None,
    on_result: Optional[Callable[[PageResult], None]] = None,
    follow_redirects: bool = True,
) -> CrawlReport:
    canonical_seed(seed)
    async with http.client(timeout=timeout, follow_redirects=follow_redirects) as c:
        crawler = Crawler(
            seed,
            fetch=partial(http.fetch, c),
            on_result=on_result,
            workers=config.workers() if workers is None else workers,
        )
        return await crawler.run()
