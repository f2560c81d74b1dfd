"""
Bouncer: signed session tokens and composable authorization rules - Python Implementation

Bouncer issues, revokes and validates compact signed session tokens, and
evaluates arbitrary user attributes against ordered sync and async rules.
It is an embeddable primitive with no network or persistence layer.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="bouncer-py",
    version="0.2.0",
    author="t-bowersox",
    description="Signed session tokens and composable authorization rules",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/t-bowersox/bouncer",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Security",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "bouncer-demo=bouncer.demo.main:run",
        ],
    },
)
