"""Setup script for digestlib."""

from pathlib import Path

from setuptools import find_packages, setup


def read_long_description():
    """Use the design notes as the long description when present."""
    design = Path(__file__).parent / "DESIGN.md"
    if design.exists():
        return design.read_text(encoding="utf-8")
    return ""


setup(
    name="digestlib",
    version="0.1.0",
    description="A common interface to the MD5, SHA-1 and SHA-2 hash functions, with a CLI",
    long_description=read_long_description(),
    long_description_content_type="text/markdown",
    python_requires=">=3.10",
    packages=find_packages(include=["digestlib", "digestlib.*"]),
    install_requires=[
        "click>=8.1",
        "dependency-injector>=4.41",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        'tomli>=2.0; python_version < "3.11"',
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
    entry_points={
        "console_scripts": [
            "digestlib=digestlib.__main__:main",
        ],
    },
)
