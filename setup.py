"""
Create mykad as a Python package
"""

import io
import sys
import re

from setuptools import setup, find_packages

PKGNAME = "mykad"
GITHUB_URL = "https://github.com/mykad-py/mykad"

# --------------------------------------------------------------------

PYTHON_VERSION = (3, 8)

if sys.version_info < PYTHON_VERSION:
    sys.exit(
        "**** Sorry, {} needs at least Python {}".format(
            PKGNAME, ".".join(map(str, PYTHON_VERSION))
        )
    )


def version(filename="src/mykad/__init__.py"):
    """Read the package version without importing the package"""
    with io.open(filename, "r", encoding="utf-8") as f:
        return re.search(r'^VERSION = "([^"]+)"', f.read(), flags=re.M).group(1)


def requirements(filename="requirements.txt"):
    """Read the requirements file"""
    with io.open(filename, "r") as f:
        return [line.strip() for line in f if line.strip() and line[0] != "#"]


def long_description():
    """
    Take the README and remove markdown hyperlinks
    """
    with open("README.md", "rt", encoding="utf-8") as f:
        desc = f.read()
        desc = re.sub(r"^\[ ([^\]]+) \]: \s+ \S.*\n", r"", desc, flags=re.X | re.M)
        return re.sub(r"\[ ([^\]]+) \]", r"\1", desc, flags=re.X)


# --------------------------------------------------------------------

VERSION = version()

setup_args = dict(
    # Metadata
    name=PKGNAME,
    version=VERSION,
    description="Validation, decoding and generation of Malaysian MyKad numbers",
    long_description_content_type="text/markdown",
    long_description=long_description(),
    license="Apache",
    url=GITHUB_URL,
    download_url=GITHUB_URL + "/tarball/v" + VERSION,
    # Locate packages
    packages=find_packages("src"),
    package_dir={"": "src"},
    # Requirements
    python_requires=">=3.8",
    install_requires=requirements(),
    # Optional requirements
    extras_require={
        "test": ["pytest", "coverage"],
    },
    entry_points={
        "console_scripts": [
            "mykad = mykad.app.manage:main",
        ]
    },
    include_package_data=False,
    package_data={},
    keywords=["MyKad, NRIC, Malaysia, identity card"],
    classifiers=[
        "Programming Language :: Python :: 3 :: Only",
        "License :: OSI Approved :: Apache Software License",
        "Development Status :: 4 - Beta",
        "Topic :: Software Development :: Libraries",
    ],
)

if __name__ == "__main__":
    setup(**setup_args)
