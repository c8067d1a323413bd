#!/usr/bin/env python3
"""
YAMLQUILL CLI
-------------
Command-line front end: renders JSON/YAML data files as commented,
block-style YAML, optionally writing the result to disk.

Author: YamlQuill Team
Date: 2026-10-18
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel

from yamlquill.core.engine import RenderEngine
from yamlquill.cli.formatter import QuillFormatter

__version__ = "1.0.0"

# Global console for consistent styling across the application
console = Console()
logger = logging.getLogger("yamlquill.cli")

class QuillCLI:
    """
    CLI wrapper that translates user commands into Engine actions.
    """

    def __init__(self):
        """Initializes the CLI and sets up the argument parser."""
        self.parser = argparse.ArgumentParser(
            prog="yamlquill",
            description="YamlQuill - Commented block-style YAML from program data",
            formatter_class=argparse.RawDescriptionHelpFormatter
        )
        self.formatter = QuillFormatter(console)
        self._setup_args()

    def _setup_args(self):
        """Configures the command-line flags and subcommands."""
        self.parser.add_argument("-v", "--version", action="version", version=f"yamlquill v{__version__}")
        self.parser.add_argument("--debug", action="store_true", help="Enable debug logging")
        subparsers = self.parser.add_subparsers(dest="command", metavar="Command")

        render_parser = subparsers.add_parser("render", help="Render a JSON/YAML file as block YAML")
        render_parser.add_argument("path", help="Path to a .json, .yaml or .yml data file")
        render_parser.add_argument("--comments", help="Comment tree file mirroring the data's shape")
        render_parser.add_argument("--inline", type=int, default=2, help="Level where output switches to inline YAML (default: 2)")
        render_parser.add_argument("--indent", type=int, default=4, help="Spaces per nesting level (default: 4)")
        render_parser.add_argument("--strict", action="store_true", help="Fail on values YAML cannot represent")
        render_parser.add_argument("--objects", action="store_true", help="Render arbitrary objects as tagged mappings")
        render_parser.add_argument("-o", "--output", help="Write the result to this file")
        render_parser.add_argument("--preview", action="store_true", help="Show the result in a highlighted panel")

    def print_header(self, subtitle: str):
        """Renders the splash header."""
        console.print(Panel.fit(
            f"[bold cyan]YamlQuill v{__version__}[/bold cyan]",
            title=f"[bold white]{subtitle}[/bold white]",
            border_style="cyan"
        ))

    def _run_render(self, args: argparse.Namespace) -> int:
        """Renders one document; returns the process exit status."""
        if args.indent < 0:
            console.print("[bold red]Error:[/bold red] --indent must be zero or positive.")
            return 1

        # Paths are resolved from the current directory
        engine = RenderEngine(str(Path.cwd()), indentation=args.indent)
        report = engine.render_file(
            args.path,
            comments_path=args.comments,
            inline=args.inline,
            strict=args.strict,
            objects=args.objects,
            output_path=args.output,
            dry_run=not args.output
        )

        if not report["success"]:
            self.formatter.display_error(report)
            return 1

        if args.preview:
            self.formatter.display_preview(report["content"], args.path)
            self.formatter.print_summary([report], engine.generate_summary([report]))
        elif not report["written"]:
            sys.stdout.write(report["content"])
        else:
            console.print(f"[green]Wrote {report['output_path']}[/green]")
        return 0

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary routing entry point."""
        argv = sys.argv[1:] if argv is None else argv
        if not argv:
            self.print_header("Commented YAML Renderer")
            self.parser.print_help()
            return 0

        args = self.parser.parse_args(argv)
        logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

        if args.command == "render":
            return self._run_render(args)

        self.parser.print_help()
        return 0

def main(argv: Optional[List[str]] = None):
    """Application entry point with interrupt handling."""
    try:
        sys.exit(QuillCLI().run(argv))
    except KeyboardInterrupt:
        console.print("\n[bold red]Terminated by user.[/bold red]")
        sys.exit(1)

if __name__ == "__main__":
    main()
