"""
setup.py

Установка движка Peg Solitaire.

Использование:
    pip install -e .[test]
    pytest
"""

from setuptools import setup

setup(
    name="peg_engine",
    version="1.0.0",
    description="Peg Solitaire rules engine with undo and random autoplay",
    packages=["core", "peg_io", "utils"],
    py_modules=["game", "main"],
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "peg-solitaire=main:main",
        ],
    },
    zip_safe=False,
)
