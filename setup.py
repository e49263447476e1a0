# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="truffula",
    version="1.0.0",
    description="Print directory trees with case-insensitive sorting and depth colors",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["truffula", "truffula.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'truffula=truffula.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Environment :: Console",
    ],
)
