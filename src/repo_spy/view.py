"""Terminal rendering for repo-spy reports and messages."""

from typing import Optional

from rich.console import Console
from rich.markup import escape

from repo_spy.models import HealthStatus, RateLimitInfo, RepositoryStatistics

RULE_WIDTH = 60


def health_style(score: int) -> str:
    """Rich style for a health score."""
    if score >= 80:
        return "green"
    if score >= 60:
        return "yellow"
    if score >= 40:
        return "magenta"
    if score >= 20:
        return "red"
    return "bold red"


class CLIView:
    """Renders statistics, rate limits and status messages to a console.

    The view only formats; score and status are computed by
    ``repo_spy.scoring`` and passed in.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console(highlight=False)

    def _field(self, label: str, value: str) -> None:
        self.console.print(f"   [dim]{label}:[/dim] {value}")

    def show_welcome(self) -> None:
        self.console.print("\n[bold blue]🚀 Repo-Spy - GitHub Repository Statistics[/bold blue]")
        self.console.print("[dim]Fetching repository data from GitHub...[/dim]\n")

    def show_loading(self, message: str) -> None:
        self.console.print(f"[blue]⏳ {escape(message)}[/blue]")

    def display_repository_stats(
        self, stats: RepositoryStatistics, score: int, status: HealthStatus
    ) -> None:
        out = self.console
        out.print(f"[bold cyan]{'═' * RULE_WIDTH}[/bold cyan]")
        out.print(f"[bold cyan]{escape(stats.full_name).center(RULE_WIDTH)}[/bold cyan]")
        out.print(f"[bold cyan]{'═' * RULE_WIDTH}[/bold cyan]\n")

        out.print("[bold]📋 Basic Information:[/bold]")
        self._field("Description", escape(stats.description))
        self._field("Language", f"[yellow]{escape(stats.language)}[/yellow]")
        self._field("Default Branch", f"[green]{escape(stats.default_branch)}[/green]")
        self._field("Repository URL", f"[underline blue]{escape(stats.url)}[/underline blue]")
        out.print()

        out.print("[bold]📊 Statistics:[/bold]")
        self._field("Stars", f"[bold yellow]{stats.stars:,}[/bold yellow] ⭐")
        self._field("Forks", f"[bold blue]{stats.forks:,}[/bold blue] 🍴")
        self._field("Open Issues", f"[bold red]{stats.open_issues:,}[/bold red] 🐛")
        self._field("Size", f"[bold magenta]{stats.size:,}[/bold magenta] KB 📦")
        out.print()

        out.print("[bold]👤 Owner Information:[/bold]")
        self._field("Username", f"[cyan]{escape(stats.owner.username)}[/cyan]")
        self._field("Profile", f"[underline blue]{escape(stats.owner.profile_url)}[/underline blue]")
        out.print()

        style = health_style(score)
        out.print("[bold]🏥 Repository Health:[/bold]")
        self._field("Score", f"[bold {style}]{score}/100[/]")
        self._field("Status", f"[bold {style}]{status.value}[/]")
        out.print()

        out.print("[bold]🕒 Activity:[/bold]")
        self._field("Last Updated", f"[green]{escape(stats.last_updated)}[/green]")
        out.print()

        out.print(f"[dim]{'─' * RULE_WIDTH}[/dim]")

    def display_rate_limit(self, info: RateLimitInfo) -> None:
        core = info.core
        reset_at = core.reset_at.astimezone()
        out = self.console
        out.print("\n[bold yellow]⚠️  Rate Limit Information:[/bold yellow]")
        self._field("Remaining", f"[yellow]{core.remaining}[/yellow]/[yellow]{core.limit}[/yellow]")
        self._field("Resets at", f"[yellow]{reset_at:%Y-%m-%d %H:%M:%S}[/yellow]")
        out.print()

    def display_error(self, message: str) -> None:
        self.console.print("\n[bold red]❌ Error:[/bold red]")
        self.console.print(f"[red]   {escape(message)}[/red]\n")

    def display_success(self, message: str) -> None:
        self.console.print(f"\n[bold green]✅ {escape(message)}[/bold green]\n")
