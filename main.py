#!/usr/bin/env python3
"""Cloud Strategy Analyst CLI - turn a discovery call transcript into a strategy report.

Usage:
    # Analyze a transcript file with the default provider (Gemini)
    python main.py --input ./transcript.txt

    # Read from stdin, print Markdown instead of the terminal view
    cat transcript.txt | python main.py --input - --format markdown

    # Try the built-in sample, or just look at the prompt that would be sent
    python main.py --sample
    python main.py --sample --show-prompt

    # Keep analysing transcripts in one session
    python main.py --interactive
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from agents import CLAIMS_SYSTEM_TRANSCRIPT, StrategyAgent, build_strategy_prompt
from config import settings
from exceptions import ConfigurationError
from orchestrator import AnalysisSession
from providers import get_provider, list_providers as get_available_providers
from report import render_console, render_markdown


console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def read_input_content(input_path: str) -> str:
    """Read transcript text from a file, from stdin ('-'), or use the argument as literal text."""
    if input_path == "-":
        return sys.stdin.read()

    path = Path(input_path)
    if path.is_file():
        return path.read_text(encoding="utf-8", errors="replace")

    # Treat as literal content
    return input_path


def _print_state(session: AnalysisSession, output_format: str) -> None:
    state = session.snapshot()
    if output_format == "json":
        if state.result is not None:
            click.echo(state.result.model_dump_json(indent=2))
        if state.error:
            err_console.print(f"[red]Error:[/red] {state.error}")
    elif output_format == "markdown":
        click.echo(render_markdown(state.result))
        if state.error:
            err_console.print(f"[red]Error:[/red] {state.error}")
    else:
        render_console(console, state.result, error=state.error, is_analyzing=state.is_analyzing)


def _run_interactive(session: AnalysisSession, output_format: str) -> None:
    console.print("[dim]Enter a transcript file path to analyze; leave blank to quit.[/dim]")
    while True:
        path = click.prompt("Transcript", default="", show_default=False)
        if not path.strip():
            return
        content = read_input_content(path.strip())
        if not session.analyze(content):
            continue
        _print_state(session, output_format)


@click.command()
@click.option(
    "--input", "-i", "input_path",
    required=False,
    help="Transcript file, '-' for stdin, or literal transcript text"
)
@click.option(
    "--sample",
    is_flag=True,
    help="Analyze the built-in insurance claims discovery transcript"
)
@click.option(
    "--provider", "-p",
    type=click.Choice(["gemini", "openai", "anthropic", "litellm"]),
    default=None,
    help=f"LLM provider (default: {settings.default_provider})"
)
@click.option(
    "--model",
    default=None,
    help="Model name (e.g., gemini-2.5-pro, gpt-4o, claude-sonnet, gemini/gemini-2.5-pro)"
)
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(["rich", "markdown", "json"]),
    default="rich",
    help="Output format (default: rich terminal view)"
)
@click.option(
    "--show-prompt",
    is_flag=True,
    help="Print the prompt that would be sent and exit"
)
@click.option(
    "--interactive",
    is_flag=True,
    help="Analyze transcripts one after another in a single session"
)
@click.option(
    "--list-providers",
    is_flag=True,
    help="List available providers and exit"
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Verbose output"
)
def main(
    input_path: Optional[str],
    sample: bool,
    provider: Optional[str],
    model: Optional[str],
    output_format: str,
    show_prompt: bool,
    interactive: bool,
    list_providers: bool,
    verbose: bool,
):
    """Cloud Strategy Analyst: discovery transcript in, modernization strategy out."""
    configure_logging("DEBUG" if verbose else settings.log_level)

    # Handle --list-providers
    if list_providers:
        console.print("[bold]Available LLM Providers:[/bold]\n")
        for name, available in get_available_providers(settings).items():
            status = "[green]✓ Ready[/green]" if available else "[red]✗ No API key[/red]"
            console.print(f"  {name:12} {status}")
        console.print("\n[dim]Set API keys via environment variables:[/dim]")
        console.print("  GEMINI_API_KEY, OPENAI_API_KEY, ANTHROPIC_API_KEY")
        return

    transcript = ""
    if sample:
        transcript = CLAIMS_SYSTEM_TRANSCRIPT
    elif input_path:
        transcript = read_input_content(input_path)
    elif not interactive:
        err_console.print("[red]Error: --input, --sample or --interactive is required[/red]")
        sys.exit(1)

    if (show_prompt or not interactive) and not transcript.strip():
        err_console.print("[red]Error: Input content is empty[/red]")
        sys.exit(1)

    if show_prompt:
        click.echo(build_strategy_prompt(transcript))
        return

    try:
        llm_provider = get_provider(provider_name=provider, model=model, settings=settings)
    except ConfigurationError as e:
        err_console.print(f"[red]Configuration error:[/red] {e}")
        sys.exit(1)

    agent = StrategyAgent(llm_provider=llm_provider, model=model, settings=settings)
    session = AnalysisSession(agent)

    if output_format == "rich":
        console.print(Panel.fit(
            "[bold blue]Cloud Strategy Analyst[/bold blue]\n"
            f"[dim]{llm_provider.name} / {agent.model}[/dim]",
            border_style="blue"
        ))

    if interactive:
        if transcript.strip():
            session.analyze(transcript)
            _print_state(session, output_format)
        _run_interactive(session, output_format)
        return

    if output_format == "rich":
        with console.status("Analyzing..."):
            session.analyze(transcript)
    else:
        session.analyze(transcript)

    _print_state(session, output_format)

    if session.error:
        sys.exit(1)

    usage = agent.total_usage
    logger.info("Token usage: %d input, %d output", usage.input_tokens, usage.output_tokens)


if __name__ == "__main__":
    main()
