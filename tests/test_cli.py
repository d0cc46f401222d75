"""Tests for the command-line interface."""

import re
from uuid import uuid4

import httpx
import pytest
from rich.console import Console
from typer.testing import CliRunner

from tube_companion import __version__, cli
from tube_companion.cli import app
from tube_companion.db.session import init_db
from tube_companion.services.platform import PlatformClient

runner = CliRunner()

WATCH_URL = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
MISSING_VIDEO_ID = "missingVid0"


@pytest.fixture
def user(monkeypatch, proxy_app) -> str:
    """A fresh user whose CLI calls reach the in-process proxy."""
    init_db()

    async def get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                transport=httpx.ASGITransport(app=proxy_app),
                base_url="http://testserver",
            )
        return self._client

    monkeypatch.setattr(PlatformClient, "_get_client", get_client)
    monkeypatch.setattr(cli, "console", Console(width=200, force_terminal=False))
    return str(uuid4())


def invoke(user: str, *args: str):
    return runner.invoke(app, [*args, "--user", user])


def test_version() -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_video_id_from_url() -> None:
    result = runner.invoke(app, ["video-id", "https://youtu.be/dQw4w9WgXcQ?t=42"])

    assert result.exit_code == 0
    assert result.output.strip() == "dQw4w9WgXcQ"


def test_video_id_rejects_garbage() -> None:
    result = runner.invoke(app, ["video-id", "not a video"])

    assert result.exit_code == 1
    assert "No video ID found" in result.output


def test_videos_list_requires_user() -> None:
    result = runner.invoke(app, ["videos", "list"])

    assert result.exit_code == 1
    assert "No user given" in result.output


def test_videos_list_rejects_bad_user() -> None:
    result = runner.invoke(app, ["videos", "list", "--user", "nobody"])

    assert result.exit_code == 1
    assert "Invalid user ID" in result.output


def test_videos_list_empty() -> None:
    init_db()

    result = runner.invoke(app, ["videos", "list", "--user", str(uuid4())])

    assert result.exit_code == 0
    assert "No videos yet" in result.output


def test_notes_delete_rejects_bad_note_id() -> None:
    result = runner.invoke(app, ["notes", "delete", "dQw4w9WgXcQ", "bad-id", "--user", str(uuid4())])

    assert result.exit_code == 1
    assert "Invalid note ID" in result.output


class TestVideoCommands:
    """videos add|list|refresh|edit against the stub-backed proxy."""

    def test_add_and_list(self, user: str) -> None:
        added = invoke(user, "videos", "add", WATCH_URL)

        assert added.exit_code == 0
        assert "Video added successfully!" in added.output
        assert "Sample YouTube Video" in added.output
        assert "1,234,567" in added.output

        listed = invoke(user, "videos", "list")

        assert listed.exit_code == 0
        assert "dQw4w9WgXcQ" in listed.output

    def test_add_invalid_url(self, user: str) -> None:
        result = invoke(user, "videos", "add", "not a video")

        assert result.exit_code == 1
        assert "Invalid YouTube URL format" in result.output

    def test_add_unknown_video(self, user: str) -> None:
        result = invoke(user, "videos", "add", MISSING_VIDEO_ID)

        assert result.exit_code == 1
        assert "Failed to add video" in result.output

    def test_refresh(self, user: str) -> None:
        invoke(user, "videos", "add", WATCH_URL)

        result = invoke(user, "videos", "refresh", "dQw4w9WgXcQ")

        assert result.exit_code == 0
        assert "Data refreshed successfully!" in result.output

    def test_refresh_unknown_video(self, user: str) -> None:
        result = invoke(user, "videos", "refresh", "dQw4w9WgXcQ")

        assert result.exit_code == 1
        assert "Video not found: dQw4w9WgXcQ" in result.output

    def test_edit(self, user: str, stub_adapter) -> None:
        invoke(user, "videos", "add", WATCH_URL)

        result = invoke(user, "videos", "edit", "dQw4w9WgXcQ", "--title", "New title")

        assert result.exit_code == 0
        assert "demo mode" in result.output
        assert stub_adapter.mutations[-1][0] == "updateVideoDetails"
        assert stub_adapter.mutations[-1][1]["title"] == "New title"
        assert "New title" in invoke(user, "videos", "list").output


class TestNoteCommands:
    """notes add|list|delete."""

    def test_add_search_and_delete(self, user: str) -> None:
        invoke(user, "videos", "add", WATCH_URL)

        added = invoke(
            user, "notes", "add", "dQw4w9WgXcQ",
            "--title", "Audio levels", "--content", "Too quiet", "--tags", "audio, mix",
        )
        assert added.exit_code == 0
        note_id = re.search(r"Note ID: ([0-9a-f-]{36})", added.output).group(1)

        found = invoke(user, "notes", "list", "dQw4w9WgXcQ", "--search", "AUDIO")
        assert found.exit_code == 0
        assert "Audio levels" in found.output
        assert "audio, mix" in found.output

        missed = invoke(user, "notes", "list", "dQw4w9WgXcQ", "--search", "lighting")
        assert "No notes" in missed.output

        deleted = invoke(user, "notes", "delete", "dQw4w9WgXcQ", note_id)
        assert deleted.exit_code == 0
        assert "Note deleted successfully!" in deleted.output
        assert "No notes" in invoke(user, "notes", "list", "dQw4w9WgXcQ").output

    def test_add_blank_note(self, user: str) -> None:
        invoke(user, "videos", "add", WATCH_URL)

        result = invoke(user, "notes", "add", "dQw4w9WgXcQ", "--title", " ", "--content", "Body")

        assert result.exit_code == 1
        assert "Title and content are both required" in result.output


class TestCommentCommands:
    """comments list|post."""

    def test_list(self, user: str) -> None:
        invoke(user, "videos", "add", WATCH_URL)

        result = invoke(user, "comments", "list", "dQw4w9WgXcQ")

        assert result.exit_code == 0
        assert "John Doe" in result.output
        assert "Jane Smith" in result.output

    def test_post_reply(self, user: str, stub_adapter) -> None:
        invoke(user, "videos", "add", WATCH_URL)

        result = invoke(user, "comments", "post", "dQw4w9WgXcQ", "Thanks!", "--reply-to", "comment1")

        assert result.exit_code == 0
        assert "demo mode" in result.output
        assert stub_adapter.mutations[-1] == (
            "postComment",
            {"video_id": "dQw4w9WgXcQ", "text": "Thanks!", "parent_comment_id": "comment1"},
        )

    def test_post_blank_comment(self, user: str, stub_adapter) -> None:
        invoke(user, "videos", "add", WATCH_URL)

        result = invoke(user, "comments", "post", "dQw4w9WgXcQ", "   ")

        assert result.exit_code == 1
        assert stub_adapter.mutations == []
