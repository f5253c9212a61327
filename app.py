import streamlit as st

from board import render_board_page
from config.settings import get_config
from utils.logging_setup import setup_logging
from utils.session_manager import SessionManager

# Streamlit 페이지 설정
st.set_page_config(**get_config("page"))


# 메인 앱
def main():
    setup_logging()
    SessionManager.initialize()

    render_board_page(SessionManager.get_board())

if __name__ == "__main__":
    main()
