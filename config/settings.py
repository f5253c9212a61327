"""
애플리케이션 설정 관리
"""
import os
from typing import Dict, Any
from dotenv import load_dotenv

# 환경변수 로드
load_dotenv()

# 백엔드 설정
BACKEND_CONFIG = {
    "kind": os.getenv("BLOG_BACKEND", "sqlite"),  # sqlite | http
    "sqlite_db_path": os.getenv("BLOG_SQLITE_PATH", "./data/blog.db"),
    "base_url": os.getenv("BLOG_API_URL", "http://localhost:8000"),
    "timeout": float(os.getenv("BLOG_API_TIMEOUT", "10")),
}

# Streamlit 페이지 설정
PAGE_CONFIG = {
    "page_title": "Crypto Blog",
    "page_icon": "📰",
    "layout": "wide",
    "initial_sidebar_state": "collapsed"
}

# 블로그 화면 설정
BLOG_CONFIG = {
    "title": "Crypto Blog",
    "hero_image_url": os.getenv(
        "BLOG_HERO_IMAGE_URL",
        "https://images.unsplash.com/photo-1642465789831-a176eb4a1b14"
        "?ixid=M3w2MzIxNTd8MHwxfHJhbmRvbXx8fHx8fHx8fDE3MjQ5NzQxOTZ8&ixlib=rb-4.0.3",
    ),
    "grid_columns": 3,
}

# 로깅 설정
LOG_CONFIG = {
    "level": os.getenv("BLOG_LOG_LEVEL", "INFO"),
    "format": "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    "datefmt": "%H:%M:%S",
}

def get_config(section: str) -> Dict[str, Any]:
    """설정 섹션 반환"""
    configs = {
        "backend": BACKEND_CONFIG,
        "page": PAGE_CONFIG,
        "blog": BLOG_CONFIG,
        "log": LOG_CONFIG,
    }
    return configs.get(section, {})
