"""
Feature 패키지
콘텐츠 생성, 사용자 통계
"""
