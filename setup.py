# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="kei",
    version="0.4.0",
    description="A small Lisp with S-expressions, Q-expressions and curried lambdas",
    python_requires=">=3.10",
    packages=find_namespace_packages(include=["kei", "kei.*"], exclude=["*.__pycache__"]),
    package_data={"kei.prelude": ["*.kei"]},
    install_requires=["lark>=1.1"],
    extras_require={"test": ["pytest>=7", "hypothesis>=6"]},
    entry_points={"console_scripts": ["kei=kei.__main__:main"]},
    zip_safe=False,
)
