from pathlib import Path

import click

from analytics.aggregator import throughput_curve
from dashboard.builder import TREND_SIZE, build_dashboard
from data.config import DEFAULT_VARIANT, SITES, VARIANTS, get_site
from reports.pdf import generate_dashboard_pdf

variant_option = click.option("--variant", default=DEFAULT_VARIANT, type=click.Choice(list(VARIANTS)),
                              help="Dashboard variant (category lists, ranges and rates)")
count_option = click.option("--count", default=None, type=click.IntRange(min=0),
                            help="Number of records to generate (defaults to the variant's size)")
seed_option = click.option("--seed", default=None, type=int,
                           help="Random seed for repeatable output")


@click.group()
def cli():
    """Radiology Analytics Suite: KPIs, trends and study logs from mock data."""
    pass


@cli.command()
def variants():
    """List the available dashboard variants."""
    for name, config in VARIANTS.items():
        assignment = "cyclic" if config.cyclic_categories else "random"
        click.echo(f"  {name:<12} {config.count:>4} records | {len(config.modalities)} modalities | "
                   f"{len(config.radiologists)} radiologists | {assignment} categories")


@cli.command()
@variant_option
@count_option
@seed_option
@click.option("--trend-size", default=TREND_SIZE, type=click.IntRange(min=0),
              help="Number of records shown in the TAT vs wait trend")
def summary(variant: str, count: int | None, seed: int | None, trend_size: int):
    """Print KPI cards, modality volume, trend and study log."""
    dashboard = build_dashboard(variant, count=count, seed=seed)

    click.echo(f"\n{'=' * 60}")
    click.echo("Radiology Analytics Suite")
    click.echo(f"{'=' * 60}")
    for card in dashboard.kpi_cards:
        click.echo(f"  {card.title:<22} {card.value:>10}   {card.sub}")

    click.echo("\nProcedure Volume by Modality:")
    for row in dashboard.modality_chart:
        click.echo(f"  {row['name']:<12} {row['value']:>4}")

    click.echo("\nTAT vs Wait Time:")
    for point in dashboard.trend_for(trend_size):
        click.echo(f"  {point.label:<8} TAT {point.report_tat:>4} min | Wait {point.wait_time:>3} min")

    click.echo("\nCompliance & Quality Log:")
    click.echo("-" * 80)
    for row in dashboard.study_log:
        click.echo(f"  {row['study_id']:<10} {row['modality']:<11} {row['radiologist']:<10} "
                   f"{row['rvu']:>5} RVU | {row['status']:<6} | {row['regulatory']}")
    click.echo(f"{'=' * 60}")


@cli.command()
@variant_option
@count_option
@seed_option
def physicians(variant: str, count: int | None, seed: int | None):
    """Print radiologist productivity."""
    dashboard = build_dashboard(variant, count=count, seed=seed)

    click.echo("\nRadiologist Productivity:")
    click.echo("-" * 60)
    for i, row in enumerate(dashboard.radiologists, 1):
        click.echo(f"  {i:2d}. {row['radiologist']:<10} | {row['studies']:>3} studies | "
                   f"{row['total_rvu']:>7.2f} RVU | TAT {row['avg_report_tat']:.1f} min | "
                   f"{row['denials']} denied")


@cli.command()
@click.option("--site", default="all", type=click.Choice(list(SITES)),
              help="Site to show (all = enterprise)")
def sites(site: str):
    """Print a site's headline figures and weekly throughput curve."""
    profile = get_site(site)
    click.echo(f"\n{profile.name}")
    click.echo(f"  Monthly Volume: {profile.volume:,}")
    click.echo(f"  Avg Report TAT: {profile.avg_tat_hours}h")
    click.echo(f"  Collections:    {profile.collection_rate:.1%}")
    click.echo("\nThroughput Curve:")
    for point in throughput_curve(profile):
        click.echo(f"  {point['week']:<3} {'#' * (point['studies'] // 5)} {point['studies']}")


@cli.command()
@variant_option
@count_option
@seed_option
@click.option("--output-dir", default=None, type=click.Path(file_okay=False),
              help="Directory for the PDF (defaults to output/reports)")
def report(variant: str, count: int | None, seed: int | None, output_dir: str | None):
    """Render the dashboard to a PDF report."""
    dashboard = build_dashboard(variant, count=count, seed=seed)
    pdf_path = generate_dashboard_pdf(dashboard, Path(output_dir) if output_dir else None)
    click.echo(f"\nReport generated: {pdf_path}")


if __name__ == "__main__":
    cli()
