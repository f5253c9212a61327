"""
Streamlit 세션 상태 관리 유틸리티
"""
import streamlit as st
from typing import Callable, Optional

from board.backend import PostBackend, create_backend
from board.service import PostBoard
from config.settings import get_config

BOARD_KEY = 'post_board'


class SessionManager:
    """세션 상태 관리 클래스"""

    @staticmethod
    def initialize(backend_factory: Optional[Callable[[], PostBackend]] = None):
        """세션 상태 초기화 (세션당 게시판 하나)"""
        if BOARD_KEY not in st.session_state:
            if backend_factory is None:
                backend = create_backend(get_config("backend"))
            else:
                backend = backend_factory()
            st.session_state[BOARD_KEY] = PostBoard(backend)

    @staticmethod
    def get_board() -> PostBoard:
        """현재 세션의 게시판 반환"""
        return st.session_state[BOARD_KEY]
