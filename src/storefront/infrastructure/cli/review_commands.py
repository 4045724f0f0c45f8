"""CLI commands for product reviews."""

from __future__ import annotations

import click

from storefront.application.manage_reviews import (
    AddReviewHandler,
    DeleteReviewHandler,
    ListReviewsHandler,
)
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import Container


@click.command("add")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--author", required=True, help="Reviewer name.")
@click.option("--rating", default="5", help="1 to 5.")
@click.option("--comment", required=True, help="Review text.")
@click.pass_obj
def review_add(
    container: Container, product_id: str, author: str, rating: str, comment: str
) -> None:
    """Add a review and recompute the product rating."""
    handler = AddReviewHandler(container.unit_of_work)

    try:
        dto = handler.handle(product_id=product_id, author=author, rating=rating, comment=comment)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Review #{dto.id} ({dto.rating}/5) added to product #{product_id}")


@click.command("delete")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--id", "review_id", required=True, help="Review ID.")
@click.pass_obj
def review_delete(container: Container, product_id: str, review_id: str) -> None:
    """Delete a review and recompute the product rating."""
    handler = DeleteReviewHandler(container.unit_of_work)

    try:
        handler.handle(product_id=product_id, review_id=review_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Review #{review_id} deleted.")


@click.command("list")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.pass_obj
def review_list(container: Container, product_id: str) -> None:
    """List reviews of a product, newest first."""
    handler = ListReviewsHandler(container.unit_of_work)

    try:
        reviews = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not reviews:
        click.echo("No reviews yet.")
        return

    for r in reviews:
        click.echo(f"#{r.id} {r.rating}/5 by {r.author} ({r.created_at})")
        click.echo(f"    {r.comment}")
