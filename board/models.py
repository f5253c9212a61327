"""
게시판 데이터 모델
"""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Mapping


def _text(value: Any) -> str:
    # null 텍스트 필드는 빈 문자열로
    return "" if value is None else str(value)


class BoardView(Enum):
    """게시판 화면 상태"""
    LOADING = "loading"
    EMPTY = "empty"
    POPULATED = "populated"


@dataclass(frozen=True)
class Post:
    """백엔드가 소유하는 게시글 (timestamp는 epoch 기준 나노초)"""
    id: int
    title: str
    body: str
    author: str
    timestamp: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Post":
        # 64비트 id/timestamp는 문자열로 오는 경우가 있음
        return cls(
            id=int(data["id"]),
            title=_text(data["title"]),
            body=_text(data["body"]),
            author=_text(data["author"]),
            timestamp=int(data["timestamp"]),
        )

    @property
    def posted_at(self) -> datetime:
        millis = self.timestamp // 1_000_000
        return datetime.fromtimestamp(millis / 1000).astimezone()

    def render_posted(self) -> str:
        return self.posted_at.strftime('%Y-%m-%d %H:%M:%S')


@dataclass
class Draft:
    """작성 중인 새 게시글"""
    title: str = ""
    body: str = ""
    author: str = ""

    FIELDS = ("title", "body", "author")

    def update(self, field: str, value: str):
        if field not in self.FIELDS:
            raise ValueError(f"Unknown draft field: {field!r}")
        setattr(self, field, value)
