"""
PostBoard 상태 전이 테스트
"""
import asyncio
import logging

import pytest

from board.models import BoardView, Draft
from board.service import PostBoard
from fakes import FakeBackend, make_post


class TestInitialState:
    def test_starts_empty_and_idle(self, fake_backend):
        board = PostBoard(fake_backend)

        assert board.posts == []
        assert board.loading is False
        assert board.dialog_open is False
        assert board.draft == Draft()
        assert board.view == BoardView.EMPTY
        assert fake_backend.calls == []


class TestLoadPosts:
    def test_replaces_posts_with_backend_snapshot(self):
        snapshot = [make_post(2, title="Second"), make_post(1, title="First")]
        board = PostBoard(FakeBackend([snapshot]))

        assert asyncio.run(board.load_posts()) is True

        assert len(board.posts) == len(snapshot)
        for shown, record in zip(board.posts, snapshot):
            assert shown == record
        assert board.loading is False
        assert board.view == BoardView.POPULATED

    def test_keeps_backend_order(self):
        snapshot = [make_post(1), make_post(3), make_post(2)]
        board = PostBoard(FakeBackend([snapshot]))

        asyncio.run(board.load_posts())

        assert [p.id for p in board.posts] == [1, 3, 2]

    def test_second_snapshot_replaces_first(self):
        first = [make_post(1), make_post(2), make_post(3)]
        second = [make_post(4)]
        board = PostBoard(FakeBackend([first, second]))

        asyncio.run(board.load_posts())
        asyncio.run(board.load_posts())

        assert board.posts == second

    def test_failure_on_initial_load_clears_loading(self, fake_backend, caplog):
        fake_backend.fail_get = True
        board = PostBoard(fake_backend)

        with caplog.at_level(logging.ERROR, logger="board.service"):
            assert asyncio.run(board.load_posts()) is False

        assert board.posts == []
        assert board.loading is False
        assert "Error fetching posts" in caplog.text

    def test_failure_keeps_previous_posts(self):
        backend = FakeBackend([[make_post(1)]])
        board = PostBoard(backend)
        asyncio.run(board.load_posts())

        backend.fail_get = True
        asyncio.run(board.load_posts())

        assert [p.id for p in board.posts] == [1]
        assert board.loading is False

    def test_loading_is_set_while_waiting(self):
        seen = []

        class ObservingBackend(FakeBackend):
            async def get_posts(self):
                seen.append(board.loading)
                return []

        board = PostBoard(ObservingBackend())
        asyncio.run(board.load_posts())

        assert seen == [True]
        assert board.loading is False


class TestMount:
    def test_loads_only_once(self, fake_backend):
        board = PostBoard(fake_backend)

        asyncio.run(board.mount())
        asyncio.run(board.mount())

        assert fake_backend.calls == [("get_posts",)]
        assert board.mounted is True


class TestDialog:
    def test_open_then_cancel_makes_no_backend_calls(self):
        backend = FakeBackend([[make_post(1)]])
        board = PostBoard(backend)
        asyncio.run(board.load_posts())
        backend.calls.clear()
        posts_before = list(board.posts)

        board.open_new_post_dialog()
        assert board.dialog_open is True
        board.cancel_new_post()

        assert board.dialog_open is False
        assert board.posts == posts_before
        assert backend.calls == []

    def test_cancel_keeps_draft(self, fake_backend):
        board = PostBoard(fake_backend)
        board.open_new_post_dialog()
        board.update_draft_field("title", "Unfinished")

        board.cancel_new_post()
        board.open_new_post_dialog()

        assert board.draft.title == "Unfinished"

    def test_update_draft_field_allows_empty_values(self, fake_backend):
        board = PostBoard(fake_backend)
        board.update_draft_field("author", "Bob")
        board.update_draft_field("author", "")

        assert board.draft.author == ""

    def test_update_unknown_field_raises(self, fake_backend):
        board = PostBoard(fake_backend)

        with pytest.raises(ValueError):
            board.update_draft_field("id", "7")


class TestSubmitNewPost:
    def _fill(self, board):
        board.open_new_post_dialog()
        board.update_draft_field("title", "Hello")
        board.update_draft_field("body", "World")
        board.update_draft_field("author", "Alice")

    def test_creates_then_refreshes(self, fake_backend):
        board = PostBoard(fake_backend)
        self._fill(board)

        assert asyncio.run(board.submit_new_post()) is True

        assert fake_backend.calls == [
            ("create_post", "Hello", "World", "Alice"),
            ("get_posts",),
        ]
        assert board.dialog_open is False
        assert board.draft == Draft()
        assert board.loading is False

    def test_refresh_shows_new_snapshot(self):
        created = make_post(1, title="Hello", body="World", author="Alice")
        board = PostBoard(FakeBackend([[created]]))
        self._fill(board)

        asyncio.run(board.submit_new_post())

        assert board.posts == [created]

    def test_failure_keeps_dialog_and_draft(self, fake_backend, caplog):
        fake_backend.fail_create = True
        board = PostBoard(fake_backend)
        self._fill(board)

        with caplog.at_level(logging.ERROR, logger="board.service"):
            assert asyncio.run(board.submit_new_post()) is False

        assert board.dialog_open is True
        assert board.draft == Draft(title="Hello", body="World", author="Alice")
        assert board.loading is False
        assert fake_backend.calls == [("create_post", "Hello", "World", "Alice")]
        assert "Error creating post" in caplog.text

    def test_empty_draft_is_forwarded(self, fake_backend):
        board = PostBoard(fake_backend)
        board.open_new_post_dialog()

        asyncio.run(board.submit_new_post())

        assert fake_backend.calls[0] == ("create_post", "", "", "")

    def test_refresh_failure_still_counts_as_created(self, fake_backend):
        fake_backend.fail_get = True
        board = PostBoard(fake_backend)
        self._fill(board)

        assert asyncio.run(board.submit_new_post()) is True
        assert board.dialog_open is False
        assert board.loading is False

    def test_unexpected_error_clears_loading(self, fake_backend):
        class BrokenBackend(FakeBackend):
            async def create_post(self, title, body, author):
                raise RuntimeError("adapter bug")

        board = PostBoard(BrokenBackend())
        self._fill(board)

        with pytest.raises(RuntimeError):
            asyncio.run(board.submit_new_post())

        assert board.loading is False
        assert board.dialog_open is True
