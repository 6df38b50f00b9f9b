# pylint: disable=missing-module-docstring
from pathlib import Path

from setuptools import setup, find_packages

this_directory = Path(__file__).parent

with open(this_directory / "requirements.in", encoding="utf-8") as f:
    requirements = f.read().splitlines()

with open(this_directory / "requirements_dev.in", encoding="utf-8") as f:
    dev_requirements = f.read().splitlines()

long_description = (this_directory / "README.md").read_text(encoding="utf-8")

setup(
    name="logdate",
    version="1.0.0",
    description="logdate renders timestamps of log events as localized, timezone aware strings.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Logdate Team",
    license="LGPL-2.1 license",
    classifiers=[
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=["setuptools"] + requirements,
    extras_require={"dev": dev_requirements},
    python_requires=">=3.10",
)
