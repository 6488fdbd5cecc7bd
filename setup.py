# setup.py
from setuptools import setup, find_packages

setup(
    name="lispy",
    version="0.8.0",
    description="Evaluator for a minimal prefix-notation arithmetic Lisp",
    packages=find_packages(include=["lispy", "lispy.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["lispy = lispy.__main__:main"],
    },
    zip_safe=False,
)
