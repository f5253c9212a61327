"""
공용 유틸리티
"""
