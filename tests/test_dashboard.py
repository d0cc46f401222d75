"""Tests for the dashboard view model."""

from uuid import uuid4

import pytest
from sqlalchemy import func, select

from tube_companion.db.models import NoteModel, VideoModel
from tube_companion.domain.enums import DashboardState, NotificationLevel
from tube_companion.domain.models import Note
from tube_companion.services.dashboard import filter_notes, parse_tags

MISSING_VIDEO_ID = "missingVid0"
WATCH_URL = "https://www.youtube.com/watch?v=dQw4w9WgXcQ&extra=1"


def count(session_factory, model) -> int:
    with session_factory() as session:
        return session.scalar(select(func.count()).select_from(model))


def levels(dashboard) -> list[NotificationLevel]:
    return [n.level for n in dashboard.notifications]


class TestLoading:
    """Startup and video selection."""

    @pytest.mark.asyncio
    async def test_load_without_videos_is_empty(self, dashboard) -> None:
        assert dashboard.state == DashboardState.LOADING

        await dashboard.load()

        assert dashboard.state == DashboardState.EMPTY
        assert dashboard.selected is None

    @pytest.mark.asyncio
    async def test_load_selects_newest_video(self, dashboard) -> None:
        await dashboard.add_video("aaaaaaaaaaa")
        newest = await dashboard.add_video("bbbbbbbbbbb")
        dashboard.selected = None

        await dashboard.load()

        assert dashboard.state == DashboardState.BROWSING
        assert dashboard.selected.id == newest.id
        assert len(dashboard.comments) == 2

    @pytest.mark.asyncio
    async def test_select_video_loads_its_notes(self, dashboard) -> None:
        first = await dashboard.add_video("aaaaaaaaaaa")
        await dashboard.add_note("First note", "Body")
        await dashboard.add_video("bbbbbbbbbbb")
        assert dashboard.notes == []

        await dashboard.select_video(first.id)

        assert dashboard.selected.id == first.id
        assert [n.title for n in dashboard.notes] == ["First note"]

    @pytest.mark.asyncio
    async def test_select_unknown_video(self, dashboard) -> None:
        await dashboard.select_video(uuid4())

        assert levels(dashboard) == [NotificationLevel.ERROR]


class TestAddVideo:
    """Adding videos from URLs."""

    @pytest.mark.asyncio
    async def test_add_from_url_moves_to_browsing(self, dashboard, session_factory) -> None:
        await dashboard.load()
        assert dashboard.state == DashboardState.EMPTY

        video = await dashboard.add_video(WATCH_URL)

        assert video is not None
        assert video.youtube_video_id == "dQw4w9WgXcQ"
        assert video.title == "Sample YouTube Video"
        assert video.view_count == 1234567
        assert video.thumbnail_url.endswith("/maxresdefault.jpg")
        assert video.published_at is not None
        assert dashboard.state == DashboardState.BROWSING
        assert dashboard.selected.id == video.id
        assert [c.id for c in dashboard.comments] == ["comment1", "comment2"]
        assert count(session_factory, VideoModel) == 1
        assert NotificationLevel.SUCCESS in levels(dashboard)

    @pytest.mark.asyncio
    async def test_add_accepts_unusual_url_id(self, dashboard) -> None:
        video = await dashboard.add_video("https://youtu.be/shortId?t=3")

        assert video is not None
        assert video.youtube_video_id == "shortId"
        assert dashboard.state == DashboardState.BROWSING

    @pytest.mark.asyncio
    async def test_add_blank_input(self, dashboard, session_factory) -> None:
        assert await dashboard.add_video("   ") is None

        assert dashboard.notifications[0].message == "Please enter a YouTube video URL or ID"
        assert count(session_factory, VideoModel) == 0

    @pytest.mark.asyncio
    async def test_add_invalid_url(self, dashboard, session_factory) -> None:
        assert await dashboard.add_video("not a video") is None

        assert dashboard.notifications[0].level == NotificationLevel.ERROR
        assert "Invalid YouTube URL format" in dashboard.notifications[0].message
        assert count(session_factory, VideoModel) == 0

    @pytest.mark.asyncio
    async def test_add_unknown_video(self, dashboard, session_factory) -> None:
        assert await dashboard.add_video(MISSING_VIDEO_ID) is None

        assert levels(dashboard) == [NotificationLevel.ERROR]
        assert count(session_factory, VideoModel) == 0

    @pytest.mark.asyncio
    async def test_add_while_signed_out(self, dashboard, auth, session_factory) -> None:
        auth.sign_out()

        assert await dashboard.add_video(WATCH_URL) is None

        assert levels(dashboard) == [NotificationLevel.ERROR]
        assert count(session_factory, VideoModel) == 0


class TestRefreshAndEdit:
    """Counter refresh and metadata editing."""

    @pytest.mark.asyncio
    async def test_refresh_writes_counters_back(self, dashboard, store) -> None:
        video = await dashboard.add_video(WATCH_URL)
        await store.update_video(video.id, view_count=0, like_count=0, comment_count=0)
        dashboard.selected = store.videos[0]

        await dashboard.refresh()

        assert dashboard.selected.view_count == 1234567
        assert dashboard.selected.like_count == 89012
        assert dashboard.selected.comment_count == 3456
        stored = await store.fetch_videos()
        assert stored[0].view_count == 1234567
        assert dashboard.notifications[-1].message == "Data refreshed successfully!"

    @pytest.mark.asyncio
    async def test_refresh_without_selection(self, dashboard) -> None:
        await dashboard.refresh()

        assert dashboard.notifications == []

    @pytest.mark.asyncio
    async def test_edit_and_save(self, dashboard, store, stub_adapter) -> None:
        video = await dashboard.add_video(WATCH_URL)

        dashboard.start_editing()
        assert dashboard.state == DashboardState.EDITING_VIDEO
        assert dashboard.video_edit.title == "Sample YouTube Video"

        saved = await dashboard.save_video("New title", "New description")

        assert saved is True
        assert dashboard.state == DashboardState.BROWSING
        assert dashboard.video_edit is None
        assert dashboard.selected.title == "New title"
        assert store.videos[0].description == "New description"
        assert stub_adapter.mutations[-1][0] == "updateVideoDetails"
        # The platform only simulated the write, and the user is told so
        assert dashboard.notifications[-1].level == NotificationLevel.INFO
        assert "demo mode" in dashboard.notifications[-1].message
        assert video.id == dashboard.selected.id

    @pytest.mark.asyncio
    async def test_cancel_editing(self, dashboard) -> None:
        await dashboard.add_video(WATCH_URL)
        dashboard.start_editing()

        dashboard.cancel_editing()

        assert dashboard.state == DashboardState.BROWSING
        assert dashboard.video_edit is None


class TestNotes:
    """Note management and search."""

    @pytest.mark.asyncio
    async def test_add_note_parses_tags(self, dashboard) -> None:
        await dashboard.add_video(WATCH_URL)

        note = await dashboard.add_note("Audio", "Fix the levels", "audio, , technical ,")

        assert note is not None
        assert note.tags == ["audio", "technical"]
        assert dashboard.notes[0].id == note.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("title,content", [("", "Content"), ("Title", ""), ("  ", "  ")])
    async def test_blank_note_is_noop(self, dashboard, session_factory, title, content) -> None:
        await dashboard.add_video(WATCH_URL)
        before = list(dashboard.notifications)

        assert await dashboard.add_note(title, content, "tag") is None

        assert dashboard.notes == []
        assert dashboard.notifications == before
        assert count(session_factory, NoteModel) == 0

    @pytest.mark.asyncio
    async def test_delete_note(self, dashboard, session_factory) -> None:
        await dashboard.add_video(WATCH_URL)
        keep = await dashboard.add_note("Keep", "Body")
        drop = await dashboard.add_note("Drop", "Body")

        await dashboard.delete_note(drop.id)
        await dashboard.delete_note(drop.id)

        assert [n.id for n in dashboard.notes] == [keep.id]
        assert count(session_factory, NoteModel) == 1

    @pytest.mark.asyncio
    async def test_search(self, dashboard) -> None:
        await dashboard.add_video(WATCH_URL)
        audio = await dashboard.add_note("Improvement Ideas", "Better lighting", "Audio, technical")
        feedback = await dashboard.add_note("Audience Feedback", "More examples", "tutorial")

        assert [n.id for n in dashboard.search("AUDIO")] == [audio.id]
        assert [n.id for n in dashboard.search("audi")] == [feedback.id, audio.id]
        assert [n.id for n in dashboard.search("examples")] == [feedback.id]
        assert dashboard.search("nothing matches") == []
        assert [n.id for n in dashboard.search("")] == [feedback.id, audio.id]


class TestComments:
    """Comment posting and deletion."""

    @pytest.mark.asyncio
    async def test_post_comment_prepends_local_comment(self, dashboard, stub_adapter) -> None:
        await dashboard.add_video(WATCH_URL)
        before = len(dashboard.comments)

        comment = await dashboard.post_comment("Thanks for watching!")

        assert comment is not None
        assert len(dashboard.comments) == before + 1
        assert dashboard.comments[0] is comment
        assert comment.author_name == "You"
        assert comment.like_count == 0
        assert comment.is_local is True
        assert stub_adapter.mutations[-1] == (
            "postComment",
            {"video_id": "dQw4w9WgXcQ", "text": "Thanks for watching!", "parent_comment_id": None},
        )

    @pytest.mark.asyncio
    async def test_post_blank_comment_is_noop(self, dashboard, stub_adapter) -> None:
        await dashboard.add_video(WATCH_URL)
        before = list(dashboard.comments)

        assert await dashboard.post_comment("   ") is None

        assert dashboard.comments == before
        assert stub_adapter.mutations == []

    @pytest.mark.asyncio
    async def test_delete_comment(self, dashboard) -> None:
        await dashboard.add_video(WATCH_URL)

        assert await dashboard.delete_comment("comment1") is True
        assert [c.id for c in dashboard.comments] == ["comment2"]
        assert await dashboard.delete_comment("comment1") is False


@pytest.mark.asyncio
async def test_sign_out_clears_state(dashboard, auth) -> None:
    await dashboard.add_video(WATCH_URL)
    await dashboard.add_note("Title", "Body")
    dashboard.search_query = "x"

    dashboard.sign_out()

    assert dashboard.state == DashboardState.LOADING
    assert dashboard.selected is None
    assert dashboard.videos == []
    assert dashboard.notes == []
    assert dashboard.comments == []
    assert dashboard.search_query == ""
    assert auth.is_authenticated is False


def test_parse_tags() -> None:
    assert parse_tags("a, b ,,c") == ["a", "b", "c"]
    assert parse_tags("") == []


def test_filter_notes_keeps_order() -> None:
    video_id = uuid4()
    notes = [
        Note(id=uuid4(), video_id=video_id, title="One", content="alpha", tags=["x"]),
        Note(id=uuid4(), video_id=video_id, title="Two", content="beta", tags=["Alpha"]),
        Note(id=uuid4(), video_id=video_id, title="Three", content="gamma", tags=[]),
    ]

    assert filter_notes(notes, "") == notes
    assert filter_notes(notes, "ALPHA") == notes[:2]
