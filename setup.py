"""Setup script for site_percolation package."""

from setuptools import setup, find_packages

setup(
    name="site_percolation",
    version="1.0.0",
    description="Site percolation on an n-by-n grid with union-find connectivity queries",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20",
        "scipy>=1.7",
        "pyyaml>=5.4",
        "click>=8.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov>=4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "percolation=site_percolation.cli.main:cli",
        ],
    },
)
