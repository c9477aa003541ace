from setuptools import setup, find_packages

setup(
    name = "ingest-attachment",
    version = "0.1.0",
    packages = find_packages(include=["ingest_attachment", "ingest_attachment.*"]),
    install_requires=[
        "loguru",
        "pydantic>=2.0",
        "PyYAML",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "ingest-attachment=ingest_attachment.cli:main",
        ],
    },
    python_requires = ">=3.9",
)
