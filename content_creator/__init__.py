"""
AI Content Creator
콘텐츠 생성 / 사용자 통계 백엔드
"""

__version__ = "1.0.0"
