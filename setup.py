# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="tss",
    version="0.1.0",
    description="A small tree-walking interpreter for an S-expression language",
    packages=find_namespace_packages(include=["tss", "tss.*"]),
    python_requires=">=3.11",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["tss=tss.__main__:main"],
    },
    zip_safe=False,
)
