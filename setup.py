"""Setup script for panel_coder package."""

from setuptools import setup, find_packages

setup(
    name="panel_coder",
    version="1.0.0",
    description="Dimension-coded naming and area reports for drawing panel blocks",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov",
        ],
    },
    entry_points={
        "console_scripts": [
            "panel-coder=panel_coder.cli:main",
        ],
    },
)
