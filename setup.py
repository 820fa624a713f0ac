#!/bin/env python
import os

import setuptools


with open(os.path.join("pylitopts", "__init__.py"), "r") as f:
    for line in f:
        if line.startswith("__version__"):
            version = line.split("=")[-1].strip().strip('"')
            break

with open("README.md", "r") as fh:
    long_description = fh.read()


install_reqs = [
    "chardet",
    "rich",
    "toml",
    "traitlets",
]


setuptools.setup(
    name="pylitopts",
    version=version,
    provides=["pylitopts"],
    description="Literal option tables and an exact command line scanner for Python",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(),
    python_requires=">=3.8",
    include_package_data=True,
    install_requires=install_reqs,
    extras_require={"test": ["pytest"], "develop": ["bumpversion"]},
    entry_points={
        "console_scripts": [
            "litopts-echo = pylitopts.scripts.litopts_echo:main",
            "litopts-record = pylitopts.scripts.litopts_record:main",
        ],
    },
    zip_safe=False,
    tests_require=["pytest", "pytest-runner"],
    test_suite="pylitopts.tests",
    license="LGPLv3+",
    # See https://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development",
        "Topic :: Software Development :: Libraries",
        "Environment :: Console",
        "License :: OSI Approved :: GNU Lesser General Public License v3 or later (LGPLv3+)",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
