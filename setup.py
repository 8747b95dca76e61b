# setup.py
"""Setup script for GetHash, the high-speed sparse media hasher."""

import os

from setuptools import setup, find_packages

setup(
    name="gethash",
    version="0.19",
    description="Constant-time sparse fingerprints for large media files",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    author="GetHash Team",
    packages=find_packages(exclude=["gethash.tests", "gethash.tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "tqdm>=4.50.0",
        "rich>=12.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=6.0.0",
            "pytest-cov>=2.10.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "gethash=gethash.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Multimedia :: Video",
        "Topic :: System :: Filesystems",
    ],
)
