"""
setup.py

Сборка пакета и Cython расширения union-find.

ВАЖНО: для компиляции расширения нужны системные зависимости:
  Ubuntu/Debian: sudo apt-get install python3-dev build-essential
  Fedora/RHEL: sudo dnf install python3-devel gcc gcc-c++ make
  Arch: sudo pacman -S python base-devel

Без компилятора расширение пропускается и используется чистый Python
(см. core/fast.py).

Использование:
    pip install -e .
    python setup.py build_ext --inplace
"""

from setuptools import setup, find_packages, Extension
from Cython.Build import cythonize

extensions = [
    Extension(
        "core.fast_union_find",
        ["core/fast_union_find.pyx"],
        extra_compile_args=["-O3"],
        optional=True,
    ),
]

setup(
    name="geodesic_y",
    version="1.0.0",
    description="Geodesic Y connection game: board topology and rules engine",
    python_requires=">=3.8",
    packages=find_packages(include=["core", "core.*", "utils", "utils.*", "y_io", "y_io.*"]),
    py_modules=["main"],
    ext_modules=cythonize(
        extensions,
        compiler_directives={
            "language_level": "3",
            "boundscheck": False,
            "wraparound": False,
        }
    ),
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "geodesic-y=main:main",
        ],
    },
    zip_safe=False,
)
