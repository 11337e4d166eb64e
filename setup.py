from setuptools import setup, find_packages

setup(
    name="minegrid",
    version="0.1",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "flask",
        "pyyaml",
        "numpy"
    ],
    extras_require={
        "test": ["pytest"]
    },
    entry_points={
        "console_scripts": [
            "minegrid=frontend.cli:main",
            "minegrid-web=frontend.app:main"
        ]
    },
)
