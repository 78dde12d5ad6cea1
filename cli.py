#!/usr/bin/env python3
"""
Kitchen Cursor CLI.

Usage:
    python cli.py init-db
    python cli.py create-admin --email admin@example.com
    python cli.py generate "Best Kitchen Gadgets for 2024"
    python cli.py queue
    python cli.py publish <post-id>
    python cli.py approve-review <review-id>
"""

import asyncio
from uuid import UUID

import click
from rich.console import Console
from rich.table import Table

from kitchen_cursor.infrastructure.config.logging import configure_logging

console = Console()


def _run(coro):
    return asyncio.run(coro)


@click.group()
@click.option('--log-level', default=None, help='Overrides LOG_LEVEL')
def cli(log_level):
    """Kitchen Cursor CLI."""
    configure_logging(log_level)


@cli.command('init-db')
def init_db():
    """Create missing database tables."""
    from kitchen_cursor.infrastructure.config.database import init_models

    _run(init_models())
    console.print("[bold green]Tables created[/bold green]")


@cli.command('create-admin')
@click.option('--email', required=True, help='Login email')
@click.option('--password', prompt=True, hide_input=True, confirmation_prompt=True)
@click.option('--role', type=click.Choice(['ADMIN', 'EDITOR']), default='ADMIN', show_default=True)
def create_admin(email: str, password: str, role: str):
    """Create a back-office user."""
    from kitchen_cursor.application.services.auth_service import AuthService
    from kitchen_cursor.domain.entities.admin_user import UserRole
    from kitchen_cursor.infrastructure.config.database import AsyncSessionLocal
    from kitchen_cursor.infrastructure.persistence.user_repository_impl import UserRepositoryImpl

    async def create():
        async with AsyncSessionLocal() as session:
            service = AuthService(UserRepositoryImpl(session))
            return await service.create_user(email, password, UserRole(role))

    user = _run(create())
    console.print(f"[bold green]Created {user.role.value} user {user.email}[/bold green]")


@cli.command()
@click.argument('topic')
def generate(topic: str):
    """
    Generate a post with product reviews.

    Example:
        python cli.py generate "Best Air Fryers"
    """
    from kitchen_cursor.application.ai_services.agents import ArticleWriterAgent, ProductReviewAgent
    from kitchen_cursor.application.generation import GenerationOrchestrator, ProductReviewSynthesizer
    from kitchen_cursor.infrastructure.ai.llm_provider import LLMProviderFactory
    from kitchen_cursor.infrastructure.config.database import AsyncSessionLocal
    from kitchen_cursor.infrastructure.config.settings import get_settings
    from kitchen_cursor.infrastructure.persistence.post_repository_impl import PostRepositoryImpl
    from kitchen_cursor.infrastructure.persistence.product_review_repository_impl import (
        ProductReviewRepositoryImpl,
    )

    settings = get_settings()
    console.print(f"\n[bold green]Generating post[/bold green] for: {topic}")
    console.print(f"Model: {settings.llm_provider}/{settings.llm_model}\n")

    async def run():
        provider = LLMProviderFactory.create(settings)
        article_writer = ArticleWriterAgent(llm_provider=provider)
        review_agent = ProductReviewAgent(llm_provider=provider)
        async with AsyncSessionLocal() as session:
            orchestrator = GenerationOrchestrator(
                post_repository=PostRepositoryImpl(session),
                synthesizer=ProductReviewSynthesizer(ProductReviewRepositoryImpl(session), review_agent),
                article_writer=article_writer,
                max_products=settings.generation_max_products,
                default_hero_image=settings.default_hero_image,
                slug_max_attempts=settings.slug_max_attempts,
            )
            report = await orchestrator.generate(topic)
        return report, [article_writer.get_metrics(), review_agent.get_metrics()]

    with console.status("[cyan]Generating (this can take a couple of minutes)..."):
        report, agent_metrics = _run(run())

    post = report.post
    console.print(f"[bold]{post.title}[/bold]")
    console.print(f"Slug: {post.slug}   Status: {post.status.value}   Id: {post.id}")
    console.print(f"Article: {report.article_source.value}   Hero fallback: {report.hero_fallback}")

    table = Table(title="Product reviews")
    table.add_column("Product")
    table.add_column("Rating", justify="right")
    for review in report.reviews:
        table.add_row(review.product_title, f"{review.rating:.1f}")
    console.print(table)

    if report.failed_products:
        console.print(f"[yellow]Skipped: {', '.join(report.failed_products)}[/yellow]")

    metrics_table = Table(title="Agent calls")
    for column in ("Agent", "Calls", "Failed", "Success", "Avg latency, ms"):
        metrics_table.add_column(column)
    for m in agent_metrics:
        metrics_table.add_row(
            m["agent"], str(m["total_calls"]), str(m["failed_calls"]),
            m["success_rate"], m["avg_latency_ms"],
        )
    console.print(metrics_table)


@cli.command()
def queue():
    """Show posts and product reviews waiting for moderation."""
    from kitchen_cursor.infrastructure.config.database import AsyncSessionLocal

    async def load():
        async with AsyncSessionLocal() as session:
            service = _moderation_service(session)
            return await service.list_review_queue(), await service.list_reviews_queue()

    posts, reviews = _run(load())

    posts_table = Table(title=f"Posts in review ({len(posts)})")
    posts_table.add_column("Id")
    posts_table.add_column("Title")
    posts_table.add_column("Pending reviews", justify="right")
    for post in posts:
        posts_table.add_row(str(post.id), post.title, str(len(post.product_reviews)))
    console.print(posts_table)

    reviews_table = Table(title=f"Product reviews in review ({len(reviews)})")
    reviews_table.add_column("Id")
    reviews_table.add_column("Product")
    reviews_table.add_column("Post")
    for review in reviews:
        reviews_table.add_row(str(review.id), review.product_title, review.post_title or "-")
    console.print(reviews_table)


@cli.command()
@click.argument('post_id', type=click.UUID)
@click.option('--status', default='PUBLISHED', show_default=True, help='Target status')
def publish(post_id: UUID, status: str):
    """Move a post to another status (PUBLISHED by default)."""
    from kitchen_cursor.infrastructure.config.database import AsyncSessionLocal

    async def run():
        async with AsyncSessionLocal() as session:
            return await _moderation_service(session).transition_post(post_id, status)

    post = _run(run())
    console.print(f"[bold green]{post.slug}[/bold green] is now {post.status.value}")


@cli.command('approve-review')
@click.argument('review_id', type=click.UUID)
def approve_review(review_id: UUID):
    """Publish a product review."""
    from kitchen_cursor.infrastructure.config.database import AsyncSessionLocal

    async def run():
        async with AsyncSessionLocal() as session:
            return await _moderation_service(session).transition_review(review_id, 'PUBLISHED')

    review = _run(run())
    console.print(f"[bold green]{review.product_title}[/bold green] is now {review.status.value}")


def _moderation_service(session):
    from kitchen_cursor.application.services.moderation_service import ModerationService
    from kitchen_cursor.infrastructure.persistence.featured_product_repository_impl import (
        FeaturedProductRepositoryImpl,
    )
    from kitchen_cursor.infrastructure.persistence.post_repository_impl import PostRepositoryImpl
    from kitchen_cursor.infrastructure.persistence.product_review_repository_impl import (
        ProductReviewRepositoryImpl,
    )

    return ModerationService(
        PostRepositoryImpl(session),
        ProductReviewRepositoryImpl(session),
        FeaturedProductRepositoryImpl(session),
    )


if __name__ == '__main__':
    cli()
