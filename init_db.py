"""
블로그 SQLite 데이터베이스 초기화 스크립트
"""
import os

from board.backend import SQLitePostBackend
from config.settings import get_config

backend_config = get_config("backend")
sqlite_path = backend_config["sqlite_db_path"]

# posts 테이블 생성 (데이터 디렉토리 포함)
SQLitePostBackend(sqlite_path).initialize()

print(f"[OK] 데이터베이스 초기화 완료")
print(f"SQLite DB 파일: {os.path.abspath(sqlite_path)}")
