"""
Setup script for wordreview.

wordreview is the review scheduling and sampling engine of a vocabulary
learning app. It serves two roles:

1. Scheduling - which words are due, weakest first
2. Practice - weighted random draws that favor words needing work

Storage, UI and sync live in the host application.
"""

from setuptools import find_packages, setup

setup(
    name="wordreview",
    version="1.0.0",
    description="Review scheduling and weighted sampling for vocabulary practice",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    author="wordreview contributors",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.11",
    install_requires=[
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
        "Topic :: Education :: Computer Aided Instruction (CAI)",
    ],
    keywords="learning spaced-repetition vocabulary education",
)
