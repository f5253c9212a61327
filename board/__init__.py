"""
게시판 모듈
"""
from .ui import render_board_page
from .service import PostBoard
from .backend import BackendCallFailed, HttpPostBackend, SQLitePostBackend, create_backend
from .models import BoardView, Draft, Post

__all__ = [
    'render_board_page', 'PostBoard', 'BackendCallFailed', 'HttpPostBackend',
    'SQLitePostBackend', 'create_backend', 'BoardView', 'Draft', 'Post',
]
