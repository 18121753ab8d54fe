# -*- coding: utf-8 -*-
from setuptools import setup, find_packages

long_description = "Anchored VWAP for Pandas: streaming (stateful) and vectorized"

setup(
    name = "pandas_ta_avwap",
    packages = find_packages(include=["pandas_ta_avwap", "pandas_ta_avwap.*"]),
    version = "0.1.0",
    description=long_description,
    long_description=long_description,
    keywords = ['technical analysis', 'python3', 'pandas', 'vwap'],
    license="The MIT License (MIT)",
    python_requires=">=3.8",
    classifiers = [
        'Programming Language :: Python :: 3',
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Intended Audience :: Developers',
        'Intended Audience :: Financial and Insurance Industry',
        'Topic :: Office/Business :: Financial :: Investment',
    ],
    install_requires=['numpy', 'pandas'],

    # List additional groups of dependencies here (e.g. development dependencies).
    # You can install these using the following syntax, for example:
    # $ pip install -e .[dev,test]
    extras_require = {
        'dev': ['pytest'],
        'test': ['pytest'],
    },
)
