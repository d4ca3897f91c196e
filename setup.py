# setup.py
from setuptools import setup, find_packages

setup(
    name="regula",
    version="0.1.0",
    description="Total ordering and equality over the value model of a declarative rule language",
    packages=find_packages(include=["regula", "regula.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
