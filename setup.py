"""
Setup script for pdfdesk.

Installs the ``pdfdesk`` package from ``packages/`` together with the
``pdfdesk`` console script.
"""

from pathlib import Path

from setuptools import find_packages, setup

this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding="utf-8")

setup(
    name="pdfdesk",
    version="0.1.0",
    description="Merge, split, delete pages from and compress PDF documents in-process",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={"": "packages"},
    packages=find_packages(where="packages", exclude=["tests", "tests.*"]),
    install_requires=[
        "pypdf>=4.0.0",
        "pypdfium2>=4.0.0",
        "Pillow>=10.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "pdfdesk=pdfdesk.cli.main:main",
        ],
    },
    python_requires=">=3.10",
    classifiers=[
        "Intended Audience :: End Users/Desktop",
        "Intended Audience :: Developers",
        "Topic :: Office/Business",
        "Topic :: Utilities",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Environment :: Console",
    ],
    keywords="pdf merge split delete pages compress jpeg",
    license="MIT",
    zip_safe=False,
)
