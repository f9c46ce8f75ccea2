from typing import Dict, List, Union

from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from newsroom.rag.models import IngestionReport, QueryResult

console = Console()


class Display:
    @staticmethod
    def show_welcome_banner(total_documents: int):
        banner = f"""
NEWSROOM AI
Long Beach city council agendas and city website

{total_documents} documents loaded. Type [bold]exit[/bold] to quit.
        """
        panel = Panel(
            banner.strip(), title="Welcome", border_style="bold blue", padding=(1, 2)
        )
        console.print(panel)

    @staticmethod
    def show_results(results: Union[List[QueryResult], str]):
        """Print one panel per ranked result, or the no-match message"""
        if isinstance(results, str):
            console.print(results, style="yellow")
            return

        for rank, result in enumerate(results, start=1):
            body = [
                f"[cyan]Date:[/cyan] {result.date}   [cyan]Category:[/cyan] {result.category}   "
                f"[cyan]Pages:[/cyan] {result.pages}   [cyan]Words:[/cyan] {result.word_count}",
            ]
            if result.source:
                body.append(f"[cyan]Source:[/cyan] {result.source}")
            body.append("")
            body.append(f"[bold]Summary:[/bold] {result.summary}")
            if result.context:
                body.append("")
                body.append(f"[bold]Context:[/bold] ...{result.context}...")
            if result.contact_info and not result.contact_info.is_empty():
                if result.contact_info.phones:
                    body.append(f"[bold]Phone:[/bold] {', '.join(result.contact_info.phones)}")
                if result.contact_info.emails:
                    body.append(f"[bold]Email:[/bold] {', '.join(result.contact_info.emails)}")

            console.print(Panel(
                "\n".join(body),
                title=f"{rank}. {result.identity}",
                title_align="left",
                border_style="green",
                padding=(1, 2),
            ))

    @staticmethod
    def show_ingestion_report(report: IngestionReport):
        table = Table(title="Ingestion Summary", show_header=False)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("Agenda documents processed", str(report.documents_processed))
        table.add_row("Agenda documents failed", str(report.documents_failed))
        table.add_row("Web pages crawled", str(report.pages_crawled))
        table.add_row("Web pages failed", str(report.pages_failed))
        table.add_row("Web documents merged", str(report.web_documents_merged))
        table.add_row("Total documents", str(report.total_documents))
        if report.skipped_steps:
            table.add_row("Skipped steps", ", ".join(report.skipped_steps))

        console.print(table)

    @staticmethod
    def show_crawl_report(report: Dict):
        table = Table(title="Scraping Summary")
        table.add_column("Category", style="cyan")
        table.add_column("Pages", style="green", justify="right")

        for category, count in sorted(report.get("pagesByType", {}).items()):
            table.add_row(category, str(count))

        console.print(table)
        console.print(
            f"Total pages: {report.get('totalPages', 0)}  "
            f"Words: {report.get('totalWords', 0):,}  "
            f"Errors: {report.get('pagesWithErrors', 0)}"
        )
