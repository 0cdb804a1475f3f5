#!/usr/bin/env python3
"""
Setup script for the Invoice Generator
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read the README file
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text()

# Read requirements
requirements = (this_directory / "requirements.txt").read_text().splitlines()

setup(
    name="invoice-generator",
    version="1.0.0",
    description="Exact decimal line-item totals and PDF table layout for invoices and quotations",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.8",
    install_requires=[line for line in requirements if line and not line.startswith("#")],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pdfplumber>=0.10",
        ],
    },
    entry_points={
        "console_scripts": [
            "invoice-generator=invoice_generator.cli:cli",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
