"""
Setup script for HapticsKit.
"""

from setuptools import setup, find_packages

setup(
    name="hapticskit",
    version="0.1.0",
    description="Configurable access point for Apple platform haptic feedback",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="HapticsKit Team",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "pydantic>=2.0.0",
        "python-dotenv>=1.0.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "macos": [
            "pyobjc-framework-Cocoa>=10.0",
        ],
        "ios": [
            "rubicon-objc>=0.4.9",
        ],
        "watchos": [
            "rubicon-objc>=0.4.9",
        ],
        "test": [
            "pytest>=7.0.0,<9",
        ],
    },
    entry_points={
        "console_scripts": [
            "hapticskit=hapticskit.cli:cli",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Operating System :: iOS",
        "Operating System :: MacOS",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
)
