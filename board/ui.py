"""
게시판 UI
"""
import asyncio
import html
import re

import streamlit as st

from config.settings import get_config
from .models import BoardView, Post
from .service import PostBoard

# 작성 폼 위젯 키 (Draft 필드 -> session_state 키)
DRAFT_WIDGET_KEYS = {
    "title": "draft_title",
    "body": "draft_body",
    "author": "draft_author",
}

# Markdown으로 해석되는 문자 (Streamlit 색상/아이콘 지시어의 ":" 포함)
_MARKDOWN_SPECIAL = re.compile(r"([\\`*_{}\[\]()#+\-.!|~<>$:])")


def escape_markdown(text: str) -> str:
    """백엔드 텍스트를 그대로 보이도록 Markdown 문자 이스케이프"""
    escaped = _MARKDOWN_SPECIAL.sub(r"\\\1", text)
    # 줄바꿈 유지
    return escaped.replace("\n", "  \n")


def format_caption(post: Post) -> str:
    """카드 하단 작성자/작성일 문구"""
    return f"By {post.author} on {post.render_posted()}"


def render_board_page(board: PostBoard):
    """게시판 화면 렌더링"""
    blog_config = get_config("blog")

    _render_header(blog_config)

    # 최초 진입 시 게시글 조회
    if not board.mounted:
        with st.spinner("Loading posts..."):
            asyncio.run(board.mount())

    _render_posts(board, blog_config.get("grid_columns", 3))

    st.markdown("---")
    st.button(
        "New Post",
        icon=":material/add:",
        key="new_post_button",
        on_click=board.open_new_post_dialog,
    )

    if board.dialog_open:
        _render_new_post_dialog(board)


def _render_header(blog_config: dict):
    title = html.escape(blog_config.get("title", ""))
    st.title(blog_config.get("title", ""))

    hero_image_url = blog_config.get("hero_image_url")
    if hero_image_url:
        st.markdown(
            f"""
            <div style="background-image: url('{html.escape(hero_image_url)}');
                        background-size: cover; background-position: center;
                        height: 16rem; display: flex; align-items: center;
                        justify-content: center; border-radius: 0.5rem;">
                <h1 style="color: white; text-shadow: 2px 2px 6px rgba(0,0,0,0.7);">{title}</h1>
            </div>
            """,
            unsafe_allow_html=True,
        )


def _render_posts(board: PostBoard, grid_columns: int):
    view = board.view

    if view == BoardView.LOADING:
        st.caption("⏳ Loading posts...")
        return

    if view == BoardView.EMPTY:
        st.info("No posts yet. Use the New Post button to write the first one.")
        return

    columns = st.columns(grid_columns)
    for i, post in enumerate(board.posts):
        with columns[i % grid_columns]:
            with st.container(border=True):
                st.subheader(escape_markdown(post.title))
                st.markdown(escape_markdown(post.body))
                st.caption(escape_markdown(format_caption(post)))


def _on_draft_change(board: PostBoard, field: str):
    board.update_draft_field(field, st.session_state[DRAFT_WIDGET_KEYS[field]])


def _render_new_post_dialog(board: PostBoard):
    # 위젯 상태가 없으면 현재 Draft 값으로 채움
    for field, key in DRAFT_WIDGET_KEYS.items():
        if key not in st.session_state:
            st.session_state[key] = getattr(board.draft, field)

    with st.container(border=True):
        st.subheader("Create New Post")

        st.text_input(
            "Title", key=DRAFT_WIDGET_KEYS["title"],
            on_change=_on_draft_change, args=(board, "title"),
        )
        st.text_area(
            "Body", key=DRAFT_WIDGET_KEYS["body"], height=120,
            on_change=_on_draft_change, args=(board, "body"),
        )
        st.text_input(
            "Author", key=DRAFT_WIDGET_KEYS["author"],
            on_change=_on_draft_change, args=(board, "author"),
        )

        col_cancel, col_create = st.columns([1, 1])
        with col_cancel:
            st.button("Cancel", key="cancel_post_button", on_click=board.cancel_new_post)
        with col_create:
            create_clicked = st.button("Create", key="create_post_button", type="primary")

    if create_clicked:
        with st.spinner("Creating post..."):
            created = asyncio.run(board.submit_new_post())
        if created:
            # 비워진 Draft가 다음 렌더링에 반영되도록 위젯 상태 제거
            for key in DRAFT_WIDGET_KEYS.values():
                st.session_state.pop(key, None)
        st.rerun()
