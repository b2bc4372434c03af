# setup.py
from setuptools import setup

setup(
    name="catt-lsp",
    version="0.1.0",
    description="Language server and diagnostics for the Catt language",
    packages=["catt", "catt_lsp"],
    python_requires=">=3.9",
    install_requires=[
        "pygls>=2.0",
        "lsprotocol>=2025.0.0",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
    entry_points={
        "console_scripts": [
            "catt-ls=catt_lsp.server:main",
        ],
    },
    zip_safe=False,
)
