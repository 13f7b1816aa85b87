from setuptools import setup, find_packages

setup(
    name="featurescout",
    version="0.1.0",
    description="UI feature discovery, locator synthesis and smoke-test generation",
    author="Marcos Remar",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "playwright": [
            "playwright>=1.40.0",
        ],
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
        ],
        "all": [
            "playwright>=1.40.0",
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
        ],
    },
)
