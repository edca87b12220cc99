"""
Report rendering for simulation results.

Prints the header with theoretical costs, one table per attack family and a
closing analysis comparing observed means with theory.
"""

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .analysis import theoretical_birthday_attempts, theoretical_preimage_attempts
from .config import HASH_ALGORITHM
from .experiments import AttackFamily, ExperimentReport, SimulationResults
from .mutation import MutationStrategy


def render_header(results: SimulationResults, console: Console) -> None:
    config = results.config
    birthday_expected = theoretical_birthday_attempts(config.birthday_bits)
    seed_line = f"Seed: {results.seed}\n" if results.seed is not None else ""

    console.print(
        Panel(
            f"Hash algorithm: {HASH_ALGORITHM}\n"
            f"Experiments per family: {config.num_experiments}\n"
            f"Attempt cap per trial: {config.max_attempts:,}\n"
            f"{seed_line}"
            f"Preimage cost (theoretical): O(2^{config.preimage_bits}) = "
            f"{theoretical_preimage_attempts(config.preimage_bits):,.0f} attempts\n"
            f"Birthday cost (theoretical): O(sqrt(2^{config.birthday_bits})) ~ "
            f"{birthday_expected:,.0f} attempts",
            title="[bold]Truncated hash attack simulation[/bold]",
            border_style="green",
        )
    )


def build_family_table(family: AttackFamily, reports) -> Table:
    """Build the results table for one attack family."""
    bits = reports[0].bits if reports else 0
    table = Table(
        title=f"{family.title} - truncated to {bits} bits", border_style="green"
    )
    table.add_column("Strategy", style="bold")
    table.add_column("Mean (M)", justify="right")
    table.add_column("Variance (D)", justify="right")
    table.add_column("Std dev", justify="right")
    table.add_column("Theoretical", justify="right")
    table.add_column("Deviation", justify="right")
    table.add_column("Min/Max", justify="right")
    table.add_column("Trials ok/failed", justify="right")

    for report in reports:
        stats = report.stats
        table.add_row(
            report.strategy.label,
            f"{stats.mean:.2f}",
            f"{stats.variance:.2f}",
            f"±{stats.std_dev:.2f}",
            f"{report.theoretical:.2f}",
            f"{report.deviation:.2f}%",
            f"{stats.min_attempts}/{stats.max_attempts}",
            f"{stats.successful}/{stats.failed}",
        )
    return table


def _summary_line(report: ExperimentReport) -> str:
    return (
        f"  Observed ({report.strategy.value}): {report.stats.mean:,.0f} attempts "
        f"({report.percent_of_theory:.1f}% of theory)"
    )


def render_analysis(results: SimulationResults, console: Console) -> None:
    config = results.config
    console.rule("Analysis")

    console.print(f"\n[bold]Preimage Attack ({config.preimage_bits} bits):[/bold]")
    console.print(
        f"  Theoretical: 2^{config.preimage_bits} = "
        f"{theoretical_preimage_attempts(config.preimage_bits):,.0f} attempts"
    )
    for strategy in MutationStrategy:
        console.print(
            _summary_line(results.report_for(AttackFamily.PREIMAGE, strategy))
        )

    console.print(f"\n[bold]Birthday Attack ({config.birthday_bits} bits):[/bold]")
    console.print(
        f"  Theoretical: sqrt(pi/2 * 2^{config.birthday_bits}) ~ "
        f"{theoretical_birthday_attempts(config.birthday_bits):,.0f} attempts"
    )
    for strategy in MutationStrategy:
        console.print(
            _summary_line(results.report_for(AttackFamily.BIRTHDAY, strategy))
        )

    half_bits = config.birthday_bits // 2
    console.print("\n[bold]Conclusion:[/bold]")
    console.print(
        f"  A birthday attack on {config.birthday_bits} bits costs about as much "
        f"as a preimage attack on {half_bits} bits"
    )
    console.print(
        f"  Both are O(2^{half_bits}): "
        f"{theoretical_preimage_attempts(half_bits):,.0f} vs "
        f"{theoretical_birthday_attempts(config.birthday_bits):,.0f} attempts"
    )


def render_report(results: SimulationResults, console: Optional[Console] = None) -> None:
    """Print the full simulation report."""
    if console is None:
        console = Console()

    render_header(results, console)
    for family in (AttackFamily.PREIMAGE, AttackFamily.BIRTHDAY):
        console.print()
        console.print(build_family_table(family, results.reports[family]))
    console.print()
    render_analysis(results, console)
