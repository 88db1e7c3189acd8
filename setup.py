"""
Setup script for the mathroll-referee package.

Installs the `mathroll` rules engine from src/ together with the
`mathroll` console script that runs a demo match.
"""

from setuptools import setup, find_packages

setup(
    name="mathroll-referee",
    version="1.0.0",
    description="MathRoll - authoritative rules engine for the dice-and-equations party game",
    author="MathRoll maintainers",
    license="MIT",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
        "dev": [
            "pytest>=7.0",
            "build",
            "wheel",
        ],
    },
    entry_points={
        "console_scripts": [
            "mathroll=mathroll.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Games/Entertainment :: Board Games",
    ],
)
