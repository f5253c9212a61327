"""
게시판 백엔드 어댑터 (SQLite 로컬 저장소 / HTTP 게시글 서비스)
"""
import asyncio
import logging
import os
import sqlite3
import time
from typing import Any, Dict, List, Optional, Protocol

import httpx

from .models import Post

logger = logging.getLogger(__name__)


class BackendCallFailed(Exception):
    """백엔드 호출 실패 (네트워크/저장소/응답 형식 오류)"""

    def __init__(self, operation: str, message: str):
        super().__init__(f"{operation} failed: {message}")
        self.operation = operation


class PostBackend(Protocol):
    """게시판이 사용하는 백엔드 계약"""

    async def get_posts(self) -> List[Post]:
        ...

    async def create_post(self, title: str, body: str, author: str) -> Optional[Post]:
        ...


class SQLitePostBackend:
    """로컬 SQLite 게시글 저장소"""

    def __init__(self, sqlite_db_path: str = "./data/blog.db"):
        self.sqlite_db_path = sqlite_db_path

    def initialize(self):
        """게시글 테이블 초기화"""
        db_dir = os.path.dirname(self.sqlite_db_path)
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)

        conn = sqlite3.connect(self.sqlite_db_path)
        try:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS posts (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    title TEXT NOT NULL,
                    body TEXT NOT NULL,
                    author TEXT NOT NULL,
                    timestamp INTEGER NOT NULL
                )
            """)
            conn.commit()
        finally:
            conn.close()

    async def get_posts(self) -> List[Post]:
        try:
            return await asyncio.to_thread(self._select_posts)
        except sqlite3.Error as e:
            raise BackendCallFailed("get_posts", str(e)) from e

    async def create_post(self, title: str, body: str, author: str) -> Post:
        try:
            return await asyncio.to_thread(self._insert_post, title, body, author)
        except sqlite3.Error as e:
            raise BackendCallFailed("create_post", str(e)) from e

    def _select_posts(self) -> List[Post]:
        conn = sqlite3.connect(self.sqlite_db_path)
        conn.row_factory = sqlite3.Row
        try:
            rows = conn.execute("""
                SELECT id, title, body, author, timestamp FROM posts
                ORDER BY timestamp DESC, id DESC
            """).fetchall()
        finally:
            conn.close()

        return [Post.from_dict(dict(row)) for row in rows]

    def _insert_post(self, title: str, body: str, author: str) -> Post:
        timestamp = time.time_ns()
        conn = sqlite3.connect(self.sqlite_db_path)
        try:
            cursor = conn.execute("""
                INSERT INTO posts (title, body, author, timestamp)
                VALUES (?, ?, ?, ?)
            """, (title, body, author, timestamp))
            conn.commit()
            post_id = cursor.lastrowid
        finally:
            conn.close()

        logger.info("Stored post %s in %s", post_id, self.sqlite_db_path)
        return Post(id=post_id, title=title, body=body, author=author, timestamp=timestamp)


class HttpPostBackend:
    """
    원격 게시글 서비스 HTTP 클라이언트

    GET {base_url}/posts 로 목록을, POST {base_url}/posts 로 생성을 요청합니다.
    """

    def __init__(self, base_url: str, timeout: float = 10.0,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
        )

    async def get_posts(self) -> List[Post]:
        try:
            async with self._client() as client:
                response = await client.get("/posts")
                response.raise_for_status()
                data = response.json()

            # {"posts": [...]} 형식과 [...] 형식 모두 허용
            if isinstance(data, dict) and 'posts' in data:
                items = data['posts']
            elif isinstance(data, list):
                items = data
            else:
                raise ValueError(f"Unexpected response format: {type(data).__name__}")

            return [Post.from_dict(item) for item in items]

        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            raise BackendCallFailed("get_posts", str(e)) from e

    async def create_post(self, title: str, body: str, author: str) -> Optional[Post]:
        payload: Dict[str, Any] = {"title": title, "body": body, "author": author}
        try:
            async with self._client() as client:
                response = await client.post("/posts", json=payload)
                response.raise_for_status()

            # 생성된 게시글을 돌려주지 않는 서비스도 있음
            if not response.content:
                return None
            data = response.json()
            if isinstance(data, dict) and 'id' in data:
                return Post.from_dict(data)
            return None

        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            raise BackendCallFailed("create_post", str(e)) from e


def create_backend(settings: Dict[str, Any]) -> PostBackend:
    """설정에 맞는 백엔드 생성"""
    kind = settings.get("kind", "sqlite")

    if kind == "sqlite":
        backend = SQLitePostBackend(settings.get("sqlite_db_path", "./data/blog.db"))
        backend.initialize()
        return backend
    elif kind == "http":
        return HttpPostBackend(
            settings.get("base_url", "http://localhost:8000"),
            timeout=float(settings.get("timeout", 10.0)),
        )
    else:
        raise ValueError(f"Unknown backend kind: {kind!r}")
