"""Package setup for web_enum."""

from setuptools import setup, find_packages

setup(
    name="web-enum",
    version="1.0.0",
    description="Recursive heuristic directory discovery for HTTP(S) targets",
    packages=find_packages(include=["web_enum", "web_enum.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
        "beautifulsoup4>=4.12.0",
        "lxml>=5.0.0",
        "urllib3>=2.0.0",
        "colorlog>=6.8.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "web-enum=web_enum.cli:main",
        ],
    },
)
