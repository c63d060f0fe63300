"""
setup.py for the optverify Python package.

The package sources live under ``python/`` and the test-suite under
``tests/python/``:

    pip install -e .[dev]
    pytest tests/python
"""

from setuptools import find_packages, setup

setup(
    name="optverify",
    version="0.1.0",
    description="Structural and feasibility verifier for LP/QP/MILP/MIQP problems",
    package_dir={"": "python"},
    packages=find_packages(where="python"),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20",
        "scipy>=1.7",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0,<9",
            "pytest-cov>=4.0",
            "hypothesis>=6.0",
            "black>=23.0",
            "ruff>=0.1.0",
            "mypy>=1.0",
        ],
    },
)
