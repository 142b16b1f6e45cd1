from setuptools import setup, find_packages

setup(
    name="svgrender",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pydantic",
        "pydantic-settings",
        "python-dotenv",
        "PyYAML",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-mock",
        ],
    },
    entry_points={
        "console_scripts": [
            "svgrender-tags=svgrender.cli:main",
        ],
    },
    python_requires=">=3.8",
)
