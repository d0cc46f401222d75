"""Command-line interface using Typer."""

import asyncio
from typing import Optional
from uuid import UUID

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from tube_companion import __version__
from tube_companion.logging import setup_logging

# Setup logging
setup_logging()

app = typer.Typer(
    name="tube-companion",
    help="Tube Companion - track YouTube videos, notes and comments",
    add_completion=False,
)

# Subcommand groups
videos_app = typer.Typer(help="Tracked video commands")
notes_app = typer.Typer(help="Note commands")
comments_app = typer.Typer(help="Comment commands")
app.add_typer(videos_app, name="videos")
app.add_typer(notes_app, name="notes")
app.add_typer(comments_app, name="comments")

console = Console()

NOTIFICATION_STYLES = {
    "success": "bold green",
    "info": "bold blue",
    "error": "bold red",
}

UserOption = typer.Option(
    None,
    "--user",
    "-u",
    envvar="COMPANION_USER_ID",
    help="Signed-in user ID (UUID)",
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Tube Companion v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Tube Companion - YouTube proxy and companion dashboard."""
    pass


def _build_dashboard(user: Optional[str]):
    """Wire a dashboard for ``user`` against the configured database and proxy."""
    from tube_companion.adapters.events import DatabaseEventSink, LocalBufferEventSink
    from tube_companion.config import settings
    from tube_companion.services import (
        AuthSession,
        Dashboard,
        EventLogger,
        PlatformClient,
        StoreClient,
    )

    user = user or settings.companion_user_id
    if not user:
        console.print("[bold red]No user given. Pass --user or set COMPANION_USER_ID.[/bold red]")
        raise typer.Exit(code=1)
    try:
        user_id = UUID(user)
    except ValueError:
        console.print(f"[bold red]Invalid user ID: {user}[/bold red]")
        raise typer.Exit(code=1)

    auth = AuthSession()
    auth.sign_in(user_id)
    events = EventLogger(
        primary=DatabaseEventSink(),
        fallback=LocalBufferEventSink(
            max_size=settings.event_buffer_size,
            path=settings.event_fallback_path,
        ),
        auth=auth,
    )
    store = StoreClient(auth, events)
    platform = PlatformClient(events, auth=auth)
    return Dashboard(store, platform, events)


def _print_notifications(dashboard) -> bool:
    """Print and clear dashboard notifications. Returns False if any was an error."""
    ok = True
    for notification in dashboard.notifications:
        style = NOTIFICATION_STYLES.get(notification.level.value, "")
        console.print(f"[{style}]{notification.message}[/{style}]")
        if notification.level.value == "error":
            ok = False
    dashboard.notifications.clear()
    return ok


async def _open(dashboard, video: str | None = None) -> None:
    """Load the dashboard and select ``video`` (local UUID or YouTube ID)."""
    await dashboard.load()
    if video is None:
        return

    match = None
    for candidate in dashboard.videos:
        if str(candidate.id) == video or candidate.youtube_video_id == video:
            match = candidate
            break
    if match is None:
        console.print(f"[bold red]Video not found: {video}[/bold red]")
        console.print("[dim]Use 'tube-companion videos list' to see tracked videos[/dim]")
        raise typer.Exit(code=1)
    if dashboard.selected is None or dashboard.selected.id != match.id:
        await dashboard.select_video(match.id)


async def _shutdown(dashboard) -> None:
    await dashboard.platform.close()


def _video_table(videos) -> Table:
    table = Table(title="Tracked Videos")
    table.add_column("ID", style="dim")
    table.add_column("YouTube ID", style="cyan")
    table.add_column("Title")
    table.add_column("Views", justify="right")
    table.add_column("Likes", justify="right")
    table.add_column("Comments", justify="right")
    for video in videos:
        table.add_row(
            str(video.id),
            video.youtube_video_id,
            video.title[:50],
            f"{video.view_count:,}",
            f"{video.like_count:,}",
            f"{video.comment_count:,}",
        )
    return table


# =============================================================================
# TOP-LEVEL COMMANDS
# =============================================================================


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port"),
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload"),
) -> None:
    """Run the proxy API server."""
    import uvicorn

    from tube_companion.config import settings

    uvicorn.run(
        "tube_companion.main:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload or settings.api_reload,
    )


@app.command("init-db")
def init_db_command() -> None:
    """Create the videos, notes and event_logs tables."""
    from tube_companion.db.session import init_db

    try:
        init_db()
    except Exception as e:
        console.print(f"[bold red]Error: {e}[/bold red]")
        raise typer.Exit(code=1)
    console.print("[bold green]✓ Database ready[/bold green]")


@app.command("video-id")
def video_id(
    text: str = typer.Argument(..., help="YouTube URL or video ID"),
) -> None:
    """Extract the video ID from a URL."""
    from tube_companion.utils.video_id import extract_video_id

    extracted = extract_video_id(text)
    if extracted is None:
        console.print("[bold red]No video ID found[/bold red]")
        raise typer.Exit(code=1)
    console.print(extracted)


@app.command()
def health() -> None:
    """Check the health of the proxy server."""
    import httpx

    from tube_companion.config import settings

    url = f"http://{settings.api_host}:{settings.api_port}/health/ready"

    try:
        response = httpx.get(url, timeout=10)
        data = response.json()

        table = Table(title="Service Health")
        table.add_column("Component", style="cyan")
        table.add_column("Status")

        table.add_row("Database", "✓" if data.get("database") else "✗")
        table.add_row("YouTube API key", "✓" if data.get("youtube_configured") else "✗")
        table.add_row("YouTube API", "✓" if data.get("youtube_reachable") else "✗")

        console.print(table)

        if data.get("ready"):
            console.print("[bold green]All services healthy![/bold green]")
        else:
            console.print("[bold yellow]Some services unhealthy[/bold yellow]")
            raise typer.Exit(code=1)

    except httpx.RequestError as e:
        console.print(f"[bold red]Cannot connect to API: {e}[/bold red]")
        console.print("[dim]Is the API server running?[/dim]")
        raise typer.Exit(code=1)


# =============================================================================
# VIDEO COMMANDS
# =============================================================================


@videos_app.command("list")
def videos_list(user: Optional[str] = UserOption) -> None:
    """List tracked videos, newest first."""
    dashboard = _build_dashboard(user)

    async def run() -> None:
        try:
            await dashboard.load()
        finally:
            await _shutdown(dashboard)

    asyncio.run(run())
    if not _print_notifications(dashboard):
        raise typer.Exit(code=1)

    if not dashboard.videos:
        console.print("[dim]No videos yet. Use 'tube-companion videos add <url>'[/dim]")
        return
    console.print(_video_table(dashboard.videos))


@videos_app.command("add")
def videos_add(
    url: str = typer.Argument(..., help="YouTube URL or video ID"),
    user: Optional[str] = UserOption,
) -> None:
    """Start tracking a video."""
    dashboard = _build_dashboard(user)

    async def run():
        try:
            await dashboard.load()
            return await dashboard.add_video(url)
        finally:
            await _shutdown(dashboard)

    video = asyncio.run(run())
    ok = _print_notifications(dashboard)
    if video is None or not ok:
        raise typer.Exit(code=1)

    console.print(
        Panel.fit(
            f"[bold]{video.title}[/bold]\n\n"
            f"[cyan]YouTube ID:[/cyan] {video.youtube_video_id}\n"
            f"[cyan]Views:[/cyan] {video.view_count:,}\n"
            f"[cyan]Likes:[/cyan] {video.like_count:,}\n"
            f"[cyan]Comments:[/cyan] {video.comment_count:,}",
            title=str(video.id),
            border_style="green",
        )
    )


@videos_app.command("refresh")
def videos_refresh(
    video: str = typer.Argument(..., help="Video ID or YouTube ID"),
    user: Optional[str] = UserOption,
) -> None:
    """Re-fetch view, like and comment counts."""
    dashboard = _build_dashboard(user)

    async def run() -> None:
        try:
            await _open(dashboard, video)
            await dashboard.refresh()
        finally:
            await _shutdown(dashboard)

    asyncio.run(run())
    if not _print_notifications(dashboard):
        raise typer.Exit(code=1)
    if dashboard.selected is not None:
        console.print(_video_table([dashboard.selected]))


@videos_app.command("edit")
def videos_edit(
    video: str = typer.Argument(..., help="Video ID or YouTube ID"),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="New title"),
    description: Optional[str] = typer.Option(None, "--description", "-d", help="New description"),
    user: Optional[str] = UserOption,
) -> None:
    """Edit a video's title and description."""
    dashboard = _build_dashboard(user)

    async def run() -> bool:
        try:
            await _open(dashboard, video)
            dashboard.start_editing()
            if dashboard.video_edit is None:
                return False
            return await dashboard.save_video(
                title if title is not None else dashboard.video_edit.title,
                description if description is not None else dashboard.video_edit.description,
            )
        finally:
            await _shutdown(dashboard)

    saved = asyncio.run(run())
    ok = _print_notifications(dashboard)
    if not saved or not ok:
        raise typer.Exit(code=1)


# =============================================================================
# NOTE COMMANDS
# =============================================================================


def _print_notes(notes) -> None:
    if not notes:
        console.print("[dim]No notes[/dim]")
        return

    table = Table(title="Notes")
    table.add_column("ID", style="dim")
    table.add_column("Title", style="cyan")
    table.add_column("Content")
    table.add_column("Tags")
    for note in notes:
        table.add_row(str(note.id), note.title, note.content[:60], ", ".join(note.tags))
    console.print(table)


@notes_app.command("list")
def notes_list(
    video: str = typer.Argument(..., help="Video ID or YouTube ID"),
    search: Optional[str] = typer.Option(None, "--search", "-s", help="Filter by text or tag"),
    user: Optional[str] = UserOption,
) -> None:
    """List notes for a video."""
    dashboard = _build_dashboard(user)

    async def run() -> None:
        try:
            await _open(dashboard, video)
        finally:
            await _shutdown(dashboard)

    asyncio.run(run())
    if not _print_notifications(dashboard):
        raise typer.Exit(code=1)
    _print_notes(dashboard.search(search or ""))


@notes_app.command("add")
def notes_add(
    video: str = typer.Argument(..., help="Video ID or YouTube ID"),
    title: str = typer.Option(..., "--title", "-t", help="Note title"),
    content: str = typer.Option(..., "--content", "-c", help="Note content"),
    tags: str = typer.Option("", "--tags", help="Comma-separated tags"),
    user: Optional[str] = UserOption,
) -> None:
    """Add a note to a video."""
    dashboard = _build_dashboard(user)

    async def run():
        try:
            await _open(dashboard, video)
            return await dashboard.add_note(title, content, tags)
        finally:
            await _shutdown(dashboard)

    note = asyncio.run(run())
    ok = _print_notifications(dashboard)
    if not ok:
        raise typer.Exit(code=1)
    if note is None:
        console.print("[bold red]Title and content are both required[/bold red]")
        raise typer.Exit(code=1)
    console.print(f"[dim]Note ID: {note.id}[/dim]")


@notes_app.command("delete")
def notes_delete(
    video: str = typer.Argument(..., help="Video ID or YouTube ID"),
    note_id: str = typer.Argument(..., help="Note ID"),
    user: Optional[str] = UserOption,
) -> None:
    """Delete a note."""
    try:
        note_uuid = UUID(note_id)
    except ValueError:
        console.print(f"[bold red]Invalid note ID: {note_id}[/bold red]")
        raise typer.Exit(code=1)

    dashboard = _build_dashboard(user)

    async def run() -> None:
        try:
            await _open(dashboard, video)
            await dashboard.delete_note(note_uuid)
        finally:
            await _shutdown(dashboard)

    asyncio.run(run())
    if not _print_notifications(dashboard):
        raise typer.Exit(code=1)


# =============================================================================
# COMMENT COMMANDS
# =============================================================================


@comments_app.command("list")
def comments_list(
    video: str = typer.Argument(..., help="Video ID or YouTube ID"),
    user: Optional[str] = UserOption,
) -> None:
    """Show the latest comments for a video."""
    dashboard = _build_dashboard(user)

    async def run() -> None:
        try:
            await _open(dashboard, video)
        finally:
            await _shutdown(dashboard)

    asyncio.run(run())
    if not _print_notifications(dashboard):
        raise typer.Exit(code=1)

    if not dashboard.comments:
        console.print("[dim]No comments[/dim]")
        return

    table = Table(title="Comments")
    table.add_column("Author", style="cyan")
    table.add_column("Comment")
    table.add_column("Likes", justify="right")
    table.add_column("Published")
    for comment in dashboard.comments:
        published = comment.published_at.date().isoformat() if comment.published_at else ""
        table.add_row(comment.author_name, comment.text[:80], str(comment.like_count), published)
    console.print(table)


@comments_app.command("post")
def comments_post(
    video: str = typer.Argument(..., help="Video ID or YouTube ID"),
    text: str = typer.Argument(..., help="Comment text"),
    reply_to: Optional[str] = typer.Option(None, "--reply-to", help="Parent comment ID"),
    user: Optional[str] = UserOption,
) -> None:
    """Post a comment on a video."""
    dashboard = _build_dashboard(user)

    async def run():
        try:
            await _open(dashboard, video)
            return await dashboard.post_comment(text, reply_to)
        finally:
            await _shutdown(dashboard)

    comment = asyncio.run(run())
    ok = _print_notifications(dashboard)
    if comment is None or not ok:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
