"""
Setup script for http_adapter.

This script handles the installation of the package.
"""

import sys
from setuptools import setup, find_packages


def get_long_description():
    """Get long description from README."""
    try:
        with open("README.md", "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        return "Transport-agnostic HTTP messages and transport adapters"


def main():
    """Main setup function."""
    # Check Python version
    if sys.version_info < (3, 8):
        raise RuntimeError("Python 3.8 or higher is required")

    setup(
        name="http_adapter",
        version="0.1.0",
        description="Transport-agnostic HTTP messages and transport adapters",
        long_description=get_long_description(),
        long_description_content_type="text/markdown",
        author="Developer",
        author_email="dev@example.com",
        url="https://github.com/yourusername/http_adapter",
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        python_requires=">=3.8",
        install_requires=[
            "h11>=0.14.0",
            "typing-extensions>=4.0.0",
        ],
        extras_require={
            "dev": [
                "pytest>=7.0.0",
                "black>=22.0.0",
                "mypy>=1.0.0",
                "pre-commit>=2.20.0",
                "pytest-cov>=4.0.0",
            ],
            "docs": [
                "sphinx>=4.0.0",
                "sphinx-rtd-theme>=1.0.0",
                "myst-parser>=0.18.0",
            ],
        },
        classifiers=[
            "Development Status :: 3 - Alpha",
            "Intended Audience :: Developers",
            "License :: OSI Approved :: MIT License",
            "Operating System :: OS Independent",
            "Programming Language :: Python :: 3",
            "Programming Language :: Python :: 3.8",
            "Programming Language :: Python :: 3.9",
            "Programming Language :: Python :: 3.10",
            "Programming Language :: Python :: 3.11",
            "Programming Language :: Python :: 3.12",
            "Topic :: Internet :: WWW/HTTP",
            "Topic :: Software Development :: Libraries :: Python Modules",
        ],
        keywords=["http", "adapter", "transport", "h11"],
        zip_safe=False,
        include_package_data=True,
    )


if __name__ == "__main__":
    main()
