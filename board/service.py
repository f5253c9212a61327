"""
게시판 서비스 로직
"""
import logging
from typing import List

from .backend import BackendCallFailed, PostBackend
from .models import BoardView, Draft, Post

logger = logging.getLogger(__name__)


class PostBoard:
    """
    게시판 상태와 백엔드 호출 관리 클래스

    게시글 목록은 항상 백엔드가 마지막으로 돌려준 스냅샷 그대로이며,
    생성 후에는 부분 갱신 없이 전체 목록을 다시 조회합니다.
    """

    def __init__(self, backend: PostBackend):
        self.backend = backend
        self.posts: List[Post] = []
        self.loading = False
        self.dialog_open = False
        self.draft = Draft()
        self.mounted = False

    @property
    def view(self) -> BoardView:
        """현재 화면 상태"""
        if self.loading:
            return BoardView.LOADING
        if not self.posts:
            return BoardView.EMPTY
        return BoardView.POPULATED

    async def mount(self) -> bool:
        """최초 진입 시 한 번만 게시글 조회"""
        if self.mounted:
            return True
        self.mounted = True
        return await self.load_posts()

    async def load_posts(self) -> bool:
        """
        전체 게시글 조회

        Returns:
            조회 성공 여부. 실패 시 기존 목록은 그대로 유지됩니다.
        """
        self.loading = True
        try:
            fetched = await self.backend.get_posts()
            self.posts = list(fetched)
            return True
        except BackendCallFailed as e:
            logger.error("Error fetching posts: %s", e)
            return False
        finally:
            self.loading = False

    def open_new_post_dialog(self):
        self.dialog_open = True

    def cancel_new_post(self):
        # 작성 중인 내용은 유지
        self.dialog_open = False

    def update_draft_field(self, field: str, value: str):
        self.draft.update(field, value)

    async def submit_new_post(self) -> bool:
        """
        작성 중인 게시글 등록 후 목록 새로고침

        Returns:
            등록 성공 여부. 실패 시 대화상자와 작성 내용은 그대로 남습니다.
        """
        self.loading = True
        created = False
        try:
            await self.backend.create_post(
                self.draft.title, self.draft.body, self.draft.author
            )
            created = True
        except BackendCallFailed as e:
            logger.error("Error creating post: %s", e)
            return False
        finally:
            # 성공 시에는 load_posts가 loading을 정리
            if not created:
                self.loading = False

        self.dialog_open = False
        self.draft = Draft()
        await self.load_posts()
        return True
