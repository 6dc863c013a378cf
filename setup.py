# setup.py
from setuptools import setup, find_packages

setup(
    name="tentapress-export",
    version="0.1.0",
    description="Portable ZIP export of TentaPress pages, settings, theme, plugins and SEO data",
    author="TentaPress",
    packages=find_packages(
        exclude=(
            "tests",
            "tests.*",
            "docs",
            "build",
            "dist",
        )
    ),
    python_requires=">=3.10",
    install_requires=[
        "fastapi>=0.100",
        "pydantic>=2",
        "starlette",
    ],
    extras_require={
        "postgres": ["psycopg2-binary"],
        "test": ["pytest", "httpx"],
    },
    entry_points={
        "console_scripts": [
            "tentapress-export=tentapress_export.cli:main",
        ],
    },
)
