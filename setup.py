from setuptools import setup, find_packages


setup(
    name="turnbot",
    version="0.1.0",
    description="Hierarchical activity dispatcher for conversational bots",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pydantic>=2.4",
        "pydantic-settings>=2.0",
        "typer>=0.12",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ]
    },
    entry_points={
        "console_scripts": [
            "turnbot=turnbot.cli:app",
        ]
    },
    python_requires=">=3.10",
)
