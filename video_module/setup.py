"""
VideoKit - 학습 주제 맞춤 교육 영상 검색/추천 모듈
BALVIS 학습 도우미를 위한 YouTube Data API 기반 영상 추천 시스템
"""
from setuptools import setup, find_packages

setup(
    name="videokit",
    version="0.1.0",
    description="Educational video search, ranking and recommendation formatting",
    author="BALVIS Team",
    author_email="",
    packages=find_packages(),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0.0",
        "python-dotenv>=1.0.0",
        "httpx>=0.24.0",
        "openai>=1.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
        ]
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Education",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
