# src/yamlquill/cli/formatter.py
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

# Initialize the Rich console for high-quality terminal output
console = Console()

class QuillFormatter:
    """
    QuillFormatter: The visual side of the CLI.
    Responsible for previews, failure notices and the run summary.
    """

    def __init__(self, target: Console = None):
        self.console = target or console

    def display_preview(self, content: str, file_name: str):
        """
        Renders the produced YAML in a syntax-highlighted panel.
        """
        if not content:
            return

        syntax = Syntax(content.rstrip("\n"), "yaml", theme="monokai", line_numbers=True)
        self.console.print(Panel(
            syntax,
            title=f"Rendered: {file_name}",
            border_style="green"
        ))

    def display_error(self, report: dict):
        """Shows why a document could not be rendered."""
        self.console.print(
            f"[bold red]{report.get('status')}:[/bold red] "
            f"{report.get('file_path')} - {report.get('error')}"
        )

    def print_summary(self, reports: list, summary: dict):
        """
        Builds the summary table shown at the end of a run.
        """
        table = Table(title="YamlQuill Render Report", show_header=True, header_style="bold magenta")
        table.add_column("File Path", style="dim")
        table.add_column("Status")
        table.add_column("Lines", justify="right")
        table.add_column("Result", justify="center")

        for r in reports:
            result_icon = "✅" if r.get("success") else "❌"
            table.add_row(
                str(r.get("file_path")),
                str(r.get("status")),
                str(r.get("lines", "-")),
                result_icon
            )

        self.console.print(table)
        self.console.print(
            f"[dim]{summary['successful']}/{summary['total_files']} rendered, "
            f"{summary['written_to_disk']} written[/dim]"
        )
