import json
from uuid import UUID

import click
import uvicorn

from app.core.logging import get_logger
from app.core.dependencies import get_db_session
from app.schemas.variation import DetectResponse, MergeResponse
from app.services.variation_service import VariationService

logger = get_logger(__name__)


def parse_ids(value):
    """Parse a comma-separated list of UUIDs"""
    if not value:
        return []
    try:
        return [UUID(v.strip()) for v in value.split(",") if v.strip()]
    except ValueError as e:
        raise click.BadParameter(f"invalid product id: {e}")


@click.group()
def cli():
    """Storefront variation engine CLI"""
    pass


@cli.command()
@click.option("--host", default="0.0.0.0")
@click.option("--port", default=8000)
@click.option("--workers", default=1)
@click.option("--production", is_flag=True, help="Run in production mode")
def serve(host, port, workers, production):
    """Start the API server"""
    reload = not production  # Auto-reload unless production mode

    uvicorn.run(
        "app.api.web_app:app",
        host=host,
        port=port,
        reload=reload,
        workers=workers if production else 1,
        log_level="info" if production else "debug",
    )


@cli.command()
@click.option("--manufacturer", "manufacturer_id", type=click.UUID, help="Only check this manufacturer")
@click.option("--exclude-ids", help="Comma-separated product ids to exclude")
@click.option("--output", type=click.Path(dir_okay=False, writable=True), help="Write JSON report to file")
@click.option("--max-group-size", type=click.IntRange(min=2), help="Skip groups with more products than this")
@click.option("--limit", type=click.IntRange(min=1), help="Only report the first N groups")
def detect(manufacturer_id, exclude_ids, output, max_group_size, limit):
    """Report products that look like variations of each other"""
    with get_db_session() as db_session:
        groups = VariationService(db_session).detect_all(
            manufacturer_id=manufacturer_id,
            exclude_ids=parse_ids(exclude_ids),
            max_group_size=max_group_size,
            limit=limit,
        )

    click.echo(f"Found {len(groups)} variation groups")
    for group in groups:
        click.echo(f"\nGroup: {group.base_name} ({len(group.products)} variations)")
        click.echo(f"  SKU Pattern: {group.base_sku_pattern}")
        for name, values in group.detected_attributes.items():
            click.echo(f"  {name}: {', '.join(sorted(values))}")
        for product in group.products:
            click.echo(f"    {product.sku} - {product.name}")

    if output:
        report = DetectResponse.from_groups(groups).model_dump(by_alias=True, mode="json")
        with open(output, "w") as f:
            json.dump(report, f, indent=2)
        click.echo(f"\nReport written to {output}")


@cli.command()
@click.option("--dry-run", is_flag=True, help="Show the changes without applying them")
@click.option("--manufacturer", "manufacturer_id", type=click.UUID, help="Only merge this manufacturer")
@click.option("--exclude-ids", help="Comma-separated product ids to exclude")
@click.option("--max-group-size", type=click.IntRange(min=2), help="Skip groups with more products than this")
@click.option("--limit", type=click.IntRange(min=1), help="Only merge the first N groups")
@click.option("--async", "run_async", is_flag=True, help="Submit to the Celery worker instead")
def merge(dry_run, manufacturer_id, exclude_ids, max_group_size, limit, run_async):
    """Merge detected variation groups into variable products"""
    if run_async:
        from app.worker.tasks.variations import merge_all_variations

        result = merge_all_variations.delay()
        click.echo(f"Task submitted: {result.id}")
        return

    filters = {
        "manufacturer_id": manufacturer_id,
        "exclude_ids": parse_ids(exclude_ids),
        "max_group_size": max_group_size,
        "limit": limit,
    }
    with get_db_session() as db_session:
        service = VariationService(db_session)

        if dry_run:
            plans = service.plan_all(**filters)
            click.echo(f"{len(plans)} groups would be merged")
            for plan in plans:
                click.echo(f"\n{plan.base_name}")
                click.echo(f"  Parent: {plan.parent_sku} -> renamed '{plan.parent_name}'")
                for sku in plan.variation_skus:
                    click.echo(f"  + {sku}")
            return

        summary = service.merge_all(**filters)

    response = MergeResponse.from_summary(summary)
    click.echo(f"Groups found: {response.groups_found}")
    click.echo(f"Groups merged: {response.groups_merged}")
    click.echo(f"Products affected: {response.products_affected}")
    for result in summary.failed:
        click.echo(f"  Failed: {result.group.base_name}: {result.error}")


if __name__ == "__main__":
    cli()
