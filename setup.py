# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="sch",
    version="0.1.0",
    packages=find_namespace_packages(include=["sch", "sch.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
