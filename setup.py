from setuptools import setup, find_packages

setup(
    name="techjobs",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    author="Your Name",
    description="An in-memory query layer over a job listings CSV file",
)
