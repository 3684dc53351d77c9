from setuptools import setup, find_packages

setup(
    name="asciigraph",
    version="0.1.0",
    description="ASCII bar and scatter graphs for the terminal",
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        "numpy>=1.24.0",
        "pandas>=2.0.0",
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-mock>=3.10.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "asciigraph=asciigraph.cli:main",
        ],
    },
    python_requires=">=3.9",
)
