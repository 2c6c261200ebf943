#!/usr/bin/env python
"""Setup script for the tvbridge library."""
from pathlib import Path
from setuptools import setup, find_packages

# 프로젝트 루트 디렉토리
here = Path(__file__).parent.resolve()

long_description = (here / "README.md").read_text(encoding="utf-8")

version = "0.1.0"

setup(
    name="tvbridge",
    version=version,
    author="YC Math",
    description="Convert three-state typed values to and from dynamic value trees",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="typed-values dynamic-values encoding decoding schema",
    packages=find_packages(exclude=["tests", "tests.*", "docs", "examples"]),
    python_requires=">=3.8",

    # 기본 의존성
    install_requires=[
        "orjson>=3.9.0",
    ],

    # 선택적 의존성
    extras_require={
        "bench": ["tqdm>=4.65.0"],
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=3.0.0",
            "tqdm>=4.65.0",
        ],
    },

    # CLI 엔트리 포인트
    entry_points={
        "console_scripts": [
            "tvbridge=tvbridge.cli:main",
        ],
    },

    package_data={
        "tvbridge": ["py.typed"],
    },
    include_package_data=True,
    zip_safe=False,
)

# 설치 도움말
if __name__ == "__main__":
    print("\n" + "="*60)
    print("tvbridge 설치 옵션:")
    print("="*60)
    print("기본 설치:           pip install .")
    print("벤치마크 진행률:     pip install .[bench]")
    print("개발 도구:           pip install .[dev]")
    print("="*60 + "\n")
