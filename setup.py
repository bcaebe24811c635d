"""
setup.py

Установка пакета.

Использование:
    pip install -e .            # разработка
    pip install -e .[test]      # с тестовыми зависимостями
"""

from setuptools import setup, find_packages

setup(
    name="triangle_peg_solver",
    version="1.0.0",
    description="Solver for the triangular 15-hole peg jump puzzle",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],
    python_requires=">=3.8",
    install_requires=[
        "flask>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "triangle-peg=main:main",
        ],
    },
    zip_safe=False,
)
