from __future__ import annotations

from pathlib import Path

from setuptools import find_packages, setup  # type: ignore


ROOT = Path(__file__).resolve().parent


setup(
    name="measurestore",
    version="0.1.0",
    description="Context-partitioned in-memory measurement registry with synchronous change notifications",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where=str(ROOT / "src")),
    install_requires=[
        "numpy",
        "fastapi",
        "uvicorn",
        "httpx",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "measurestore=measurestore.__main__:main",
        ],
    },
)
