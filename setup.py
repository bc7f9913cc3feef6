#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Setup configuration for gateway-route-scanner package.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="gateway-route-scanner",
    version="1.0.0",
    description="Publishes gateway route configuration discovered from service controllers",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["route_scanner", "route_scanner.*", "microservices", "microservices.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    install_requires=[
        "fastapi>=0.100.0",
        "pydantic>=2.0.0",
        "nats-py>=2.6.0",
        "tenacity>=8.0.0",
        "python-consul2>=0.1.5",
        "python-dotenv>=1.0.0",
        "uvicorn>=0.23.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "httpx>=0.24.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "route-scanner=route_scanner.cli:run",
        ],
    },
)
