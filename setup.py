# setup.py
from setuptools import setup, find_packages

setup(
    name="egg",
    version="0.1.0",
    description="Interpreter for Egg, a tiny Lisp-like expression language",
    packages=find_packages(include=["egg", "egg.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["egg=egg.__main__:main"],
    },
    zip_safe=False,
)
