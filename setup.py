"""
Setup script for the rummy-score package.

Installs the rummy_score library (score card model, SQLite persistence,
CSV export) and the ``rummy-score`` command-line entry point.
"""

from setuptools import setup, find_packages

setup(
    name="rummy-score",
    version="1.0.0",
    description="Rummy score card - track rounds, rule-based totals, and CSV export",
    author="Rummy Score Maintainers",
    license="MIT",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
        "dev": [
            "pytest>=7.0",
            "build",
            "wheel",
        ],
    },
    # Schema file read at runtime by the storage layer
    package_data={
        "rummy_score._storage": ["schema.sql"],
    },
    include_package_data=True,
    entry_points={
        "console_scripts": [
            "rummy-score=rummy_score.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Games/Entertainment",
    ],
)
