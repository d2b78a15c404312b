from setuptools import setup, find_packages

setup(
    name="elevage",
    version="0.1.0",
    description="Text-menu Pokemon breeding collection with a flat save file",
    author="Elevage Team",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pyyaml>=6.0",
    ],
    python_requires=">=3.10",
    entry_points={
        "console_scripts": [
            "elevage=elevage.__main__:main",
        ],
    },
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
        ],
    },
)
