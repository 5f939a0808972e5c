from setuptools import setup, find_packages

setup(
    name="tintme",
    version="0.1.0",
    description="Composable terminal text styles rendered as ANSI SGR sequences",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pydantic>=2",
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.12",
)
