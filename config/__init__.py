"""
설정 패키지
"""
