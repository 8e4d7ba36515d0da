from fuze.core.logging import setup as setup_logging
import typer
from fuze.services.linkscan.cli import run as linkscan_run

app = typer.Typer(help="Fuze – same-host broken-link checker", add_completion=False)

app.command(help="Crawl a host and report broken links")(linkscan_run)

def main():
    setup_logging()
    app()
