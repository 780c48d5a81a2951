from setuptools import setup, find_packages

setup(
    name="data-semantic-guard",
    version="1.0.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    description="CI guard that detects silent data corruption against a recorded baseline.",
    author="Data Semantic Guard Team",
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "pandas",
        "pydantic>=2.0.0,<3.0.0",
        "structlog",
        "prometheus-client",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "semantic-guard=semantic_guard.cli:main",
        ],
    },
)
