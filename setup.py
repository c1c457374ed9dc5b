from __future__ import annotations

import re
from pathlib import Path

from setuptools import find_packages, setup


def load_version() -> str:
    """Read __version__ from the package without importing it."""
    versions = Path(__file__).resolve().parent / "src" / "asciinema_api" / "versions.py"
    match = re.search(r'^__version__ = "([^"]+)"', versions.read_text(encoding="utf-8"), re.M)
    return match.group(1)


def load_dependencies() -> list[str]:
    """Assemble install_requires."""
    return [
        # HTTP
        "aiohttp>=3.9.0",
        "yarl>=1.9.0",
        # Data handling
        "pydantic>=2.0.0",
        # Async file access
        "aiofiles>=23.1.0",
        # CLI
        "click>=8.1.0",
    ]


setup(
    name="asciinema-api",
    version=load_version(),
    description="Client library for the asciinema recording and streaming server API",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=load_dependencies(),
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "asciinema-api=asciinema_api.cli:main",
        ],
    },
)
