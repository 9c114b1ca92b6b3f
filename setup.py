#!/usr/bin/env python3

import os
from setuptools import setup


def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()


setup(
    name="lcsubstring",
    version="0.1.0",
    license="MIT",
    description="Find the longest common substring of two text files with a suffix array",
    long_description=read("README.rst"),
    packages=["lcsubstring"],
    install_requires=["click", "tqdm"],
    extras_require={"test": ["pytest"]},
    python_requires=">=3.6",
    entry_points={"console_scripts": ["lcsubstring = lcsubstring:main"]},
    classifiers=[
        "Topic :: Text Processing",
        "Topic :: Utilities",
    ],
)
