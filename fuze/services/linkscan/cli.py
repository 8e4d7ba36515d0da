import asyncio
import typer
from rich import print
from rich.markup import escape
from rich.table import Table
from fuze.core import config, logging as log
from .engine import CrawlReport, PageResult, crawl
from .normalizer import InvalidSeedURL, canonical_seed

app = typer.Typer()

def print_result(res: PageResult) -> None:
    status = res.status if res.status is not None else "ERR"
    if not res.ok:
        line = f"❌ {escape(res.url)} {escape(f'[{status}]')}"
        if res.error:
            line += f" [dim]{escape(res.error)}[/dim]"
        print(line)
        return
    print(f"✅ {escape(res.url)} {escape(f'[{status}]')}")
    if res.links:
        print(f"➡️  {res.links} link(s) reconciled.")

def print_summary(report: CrawlReport) -> None:
    print(
        f"👻 Done ! Fuze visited [bold]{len(report.visited)}[/bold] link(s) "
        f"in {report.elapsed:.2f}s ({report.rounds} round(s))."
    )
    if not report.broken:
        print("✅ No broken link detected !")
        return
    table = Table(title=f"Found {len(report.broken)} broken link(s)")
    table.add_column("URL")
    for u in sorted(report.broken):
        table.add_row(u)
    print(table)

@app.command("run")
def run(
    url: str = typer.Argument(..., help="The URL on which to perform the check"),
    workers: int = typer.Option(config.workers(), min=1, help="Concurrent fetches per round"),
    timeout: float = typer.Option(config.timeout(), help="Per-request timeout (s)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    _ = log.setup("DEBUG" if verbose else config.log_level())
    try:
        seed = canonical_seed(url)
    except InvalidSeedURL:
        print(
            f"😥 Oh no ! '{escape(url)}' is not a valid URL. "
            "Please check that the URL is valid and retry."
        )
        raise typer.Exit(code=1)

    print(f"[bold]🚀 Fuze starting analysis of[/bold] {escape(seed)}")
    report = asyncio.run(
        crawl(seed, timeout=timeout, workers=workers, on_result=print_result)
    )
    print_summary(report)
