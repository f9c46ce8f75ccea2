"""
Command line interface for Newsroom AI
"""

import asyncio
from dataclasses import replace
from typing import Optional

import typer
from rich.prompt import Prompt

from newsroom.cli.display import Display, console
from newsroom.cli.logger import Logger
from newsroom.config import settings
from newsroom.crawl.config import CrawlConfig
from newsroom.crawl.content_manager import ContentManager
from newsroom.crawl.crawler import WebCrawler
from newsroom.rag.ingestion import IngestionPipeline
from newsroom.rag.pipeline import create_query_pipeline

app = typer.Typer(
    name="newsroom",
    help="Newsroom AI - search Long Beach city council agendas and city pages",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

EXIT_WORDS = {"exit", "quit"}


@app.command()
def ingest(
    force_crawl: bool = typer.Option(False, "--force-crawl", help="Crawl the website even if the scrape is fresh"),
    force_documents: bool = typer.Option(False, "--force-documents", help="Reprocess every agenda PDF"),
    log_level: str = typer.Option(settings.LOG_LEVEL, help="Logging level"),
):
    """Build or refresh the corpus from agenda PDFs and the city website"""
    Logger.setup_logging(log_level)

    pipeline = IngestionPipeline()
    report = asyncio.run(pipeline.run(force_crawl=force_crawl, force_documents=force_documents))
    Display.show_ingestion_report(report)

    if report.produced_nothing:
        console.print("No documents available after ingestion.", style="red")
        raise typer.Exit(1)


@app.command()
def crawl(
    max_pages: Optional[int] = typer.Option(None, "--max-pages", help="Maximum number of pages to fetch"),
    delay: Optional[float] = typer.Option(None, "--delay", help="Seconds to wait between requests"),
    log_level: str = typer.Option(settings.LOG_LEVEL, help="Logging level"),
):
    """Crawl the city website and save the raw scrape and report"""
    Logger.setup_logging(log_level)

    config = CrawlConfig.from_settings(settings)
    if max_pages is not None:
        config = replace(config, max_pages=max_pages)
    if delay is not None:
        config = replace(config, delay=delay)

    crawler = WebCrawler(config)
    records, report = asyncio.run(crawler.crawl(save=True))
    Display.show_crawl_report(report)

    if not records:
        console.print("No pages were crawled.", style="red")
        raise typer.Exit(1)


@app.command()
def report(
    log_level: str = typer.Option("WARNING", help="Logging level"),
):
    """Show the report of the last crawl"""
    Logger.setup_logging(log_level)

    manager = ContentManager(config=CrawlConfig.from_settings(settings))
    last_report = manager.load_report()
    if last_report is None:
        console.print("No crawl report found, run `newsroom crawl` first.", style="yellow")
        raise typer.Exit(1)

    Display.show_crawl_report(last_report)
    console.print(f"Completed: {last_report.get('scrapingCompleted', 'unknown')}")


@app.command()
def query(
    text: str = typer.Argument(..., help="What to search for"),
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Only search this category"),
    log_level: str = typer.Option("WARNING", help="Logging level"),
):
    """Run a single query against the corpus"""
    Logger.setup_logging(log_level)

    pipeline = create_query_pipeline()
    try:
        console.print(f'\nSearching for: "{text}"')
        Display.show_results(asyncio.run(pipeline.query(text, category=category)))
    finally:
        pipeline.cleanup()


@app.command()
def interactive(
    log_level: str = typer.Option("WARNING", help="Logging level"),
):
    """Ask questions in a loop until you type exit"""
    Logger.setup_logging(log_level)

    pipeline = create_query_pipeline()
    Display.show_welcome_banner(len(pipeline.store))

    try:
        while True:
            try:
                text = Prompt.ask("[bold cyan]Ask about city council or city services[/bold cyan]")
            except EOFError:
                break

            text = text.strip()
            if not text:
                continue
            if text.lower() in EXIT_WORDS:
                break

            Display.show_results(asyncio.run(pipeline.query(text)))
    finally:
        pipeline.cleanup()

    console.print("Goodbye!", style="green")


@app.command()
def serve(
    host: str = typer.Option(settings.HOST, help="Bind address"),
    port: int = typer.Option(settings.PORT, help="Port"),
    reload: bool = typer.Option(settings.RELOAD, help="Reload on code changes"),
):
    """Start the HTTP API"""
    import uvicorn

    uvicorn.run(
        "newsroom.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload
    )


if __name__ == "__main__":
    app()
