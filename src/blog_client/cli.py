"""CLI commands for the blog client using Typer."""

import asyncio
import logging
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from blog_client.clients.base import BlogApiError
from blog_client.config import get_settings
from blog_client.core.post_page import PageStatus, PostPage
from blog_client.models.blog_post import BlogPost, RelatedLink
from blog_client.models.category import BlogCategory, CategoryRequest
from blog_client.services.blog_api_client import BlogApiClient, create_blog_api_client
from blog_client.utils.logging import setup_logging


app = typer.Typer(
    name="blog-client",
    help="Client for the blog categories and posts API",
    no_args_is_help=True,
)

console = Console()


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Configure logging before any command runs."""
    settings = get_settings()
    level = logging.DEBUG if verbose else settings.log_level.upper()
    setup_logging(level=level, log_file=settings.log_file)


def _client() -> BlogApiClient:
    settings = get_settings()
    try:
        settings.validate_base_url()
    except ValueError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1)
    return create_blog_api_client(
        base_url=settings.blog_api_base_url,
        timeout=settings.request_timeout,
    )


def _run(coro) -> None:
    """Run a command coroutine, turning API errors into exit code 1."""
    try:
        asyncio.run(coro)
    except BlogApiError as exc:
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        raise typer.Exit(1)


# --- Category Commands ---


@app.command()
def categories(
    include_inactive: bool = typer.Option(False, "--all", help="Include inactive categories"),
):
    """List blog categories."""
    client = _client()

    async def run():
        async with client:
            if include_inactive:
                items = await client.list_all_categories()
            else:
                items = await client.list_categories()
        _display_categories(items)

    _run(run())


@app.command()
def category(slug: str = typer.Argument(..., help="Category slug")):
    """Show a category and its posts."""
    client = _client()

    async def run():
        async with client:
            cat = await client.get_category_by_slug(slug)

        console.print(f"[bold]{escape(cat.name)}[/bold] [dim]({escape(cat.slug)})[/dim]")
        if cat.description:
            console.print(escape(cat.description))
        if cat.posts:
            console.print("\n[bold]Posts:[/bold]")
            for card in cat.posts:
                console.print(f"  - {escape(card.title)} [dim]/{escape(card.slug)}[/dim]")
        else:
            console.print("[yellow]No posts in this category[/yellow]")

    _run(run())


@app.command("create-category")
def create_category(
    name: str = typer.Argument(..., help="Category name"),
    slug: Optional[str] = typer.Option(None, "--slug", help="URL slug"),
    description: Optional[str] = typer.Option(None, "--description", "-d", help="Description"),
    inactive: bool = typer.Option(False, "--inactive", help="Create as inactive"),
):
    """Create a category."""
    client = _client()
    request = CategoryRequest(
        name=name,
        slug=slug,
        description=description,
        is_active=False if inactive else None,
    )

    async def run():
        async with client:
            created = await client.create_category(request)
        console.print(f"[green]Created category {escape(created.name)}[/green]")
        console.print(f"  ID: {created.id}")
        console.print(f"  Slug: {escape(created.slug)}")

    _run(run())


@app.command("delete-category")
def delete_category(category_id: int = typer.Argument(..., help="Category ID")):
    """Delete a category."""
    client = _client()

    async def run():
        async with client:
            result = await client.delete_category(category_id)
        console.print(f"[green]{escape(result.message or 'Category deleted')}[/green]")

    _run(run())


# --- Post Commands ---


@app.command()
def posts(
    category_slug: Optional[str] = typer.Option(None, "--category", "-c", help="Category slug"),
    include_unpublished: bool = typer.Option(False, "--all", help="Include unpublished posts"),
):
    """List blog posts."""
    client = _client()

    async def run():
        async with client:
            if category_slug:
                items = await client.list_posts_by_category(category_slug)
            elif include_unpublished:
                items = await client.list_all_posts()
            else:
                items = await client.list_posts()
        _display_posts(items)

    _run(run())


@app.command()
def post(
    slug: str = typer.Argument(..., help="Post slug"),
    track: bool = typer.Option(True, "--track/--no-track", help="Record a view"),
):
    """Show a post. Records one view unless --no-track is given."""
    client = _client()

    async def run():
        async with client:
            if not track:
                _display_post(await client.get_post_by_slug(slug))
                return

            page = PostPage(client, slug)
            status = await page.render()
            await page.aclose()

            if status is PageStatus.ERROR:
                console.print(f"[red]Error: {escape(page.error or 'unknown error')}[/red]")
                raise typer.Exit(1)

            _display_post(page.post)
            result = page.tracker.last_result
            if result is not None:
                console.print(f"[dim]{escape(result.message)}[/dim]")

    _run(run())


@app.command()
def track(slug: str = typer.Argument(..., help="Post slug")):
    """Record a single view for a post."""
    client = _client()

    async def run():
        async with client:
            result = await client.track_post_view(slug)
        if result.tracked:
            console.print(f"[green]{escape(result.message or 'View tracked')}[/green]")
        else:
            console.print(f"[yellow]{escape(result.message or 'View not counted')}[/yellow]")

    _run(run())


@app.command("delete-post")
def delete_post(post_id: int = typer.Argument(..., help="Post ID")):
    """Delete a post."""
    client = _client()

    async def run():
        async with client:
            result = await client.delete_post(post_id)
        console.print(f"[green]{escape(result.message or 'Post deleted')}[/green]")

    _run(run())


# --- Display Helpers ---


def _display_categories(items: list[BlogCategory]) -> None:
    if not items:
        console.print("[yellow]No categories found[/yellow]")
        return

    table = Table(title="Categories")
    table.add_column("ID", justify="right", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Slug")
    table.add_column("Active")
    for cat in items:
        table.add_row(str(cat.id), escape(cat.name), escape(cat.slug), "yes" if cat.is_active else "no")
    console.print(table)


def _display_posts(items: list[BlogPost]) -> None:
    if not items:
        console.print("[yellow]No posts found[/yellow]")
        return

    table = Table(title="Posts")
    table.add_column("ID", justify="right", style="dim")
    table.add_column("Title", style="cyan")
    table.add_column("Slug")
    table.add_column("Category")
    table.add_column("Views", justify="right")
    for item in items:
        table.add_row(
            str(item.id),
            escape(item.title),
            escape(item.slug),
            escape(item.category.name) if item.category else "",
            str(item.view_count),
        )
    console.print(table)


def _display_post(item: BlogPost | None) -> None:
    if item is None:
        console.print("[yellow]Post not found[/yellow]")
        return

    console.print(f"[bold]{escape(item.title)}[/bold]")
    if item.category:
        console.print(f"[dim]Category: {escape(item.category.name)}[/dim]")
    if item.published_at:
        console.print(f"[dim]Published: {item.published_at:%Y-%m-%d}[/dim]")
    console.print(f"[dim]Views: {item.view_count}[/dim]")
    if item.excerpt:
        console.print(f"\n{escape(item.excerpt)}")

    links = item.related_link_entries
    if links:
        console.print("\n[bold]Related:[/bold]")
        for link in links:
            if isinstance(link, RelatedLink):
                console.print(f"  - {escape(link.text or link.url)} [dim]{escape(link.url)}[/dim]")
            else:
                console.print(f"  - {escape(link)}")


# --- Entry Point ---


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
