"""Setup script."""

from pathlib import Path

from setuptools import find_packages
from setuptools import setup


def read_text(rel_path):
    here = Path(__file__).parent.absolute()
    with open(here / rel_path) as fp:
        return fp.read()


def get_version(rel_path):
    for line in read_text(rel_path).splitlines():
        if line.startswith("__version__"):
            delim = '"' if '"' in line else "'"
            return line.split(delim)[1]
    raise RuntimeError("Unable to find version string.")


README = read_text("README.md")
VERSION = get_version("abstractable/version.py")

setup(
    name="abstractable",
    description="Abstract method contracts checked at instance creation.",
    long_description_content_type="text/markdown",
    long_description=README,
    version=VERSION,
    license="MIT",
    install_requires=[
        "absl-py",
        "namex",
    ],
    extras_require={
        "tests": [
            "pytest",
        ],
    },
    # Supported Python versions
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3 :: Only",
        "Operating System :: Unix",
        "Operating System :: MacOS",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
    ],
    packages=find_packages(
        include=("abstractable", "abstractable.*"),
        exclude=("*_test.py",),
    ),
)
