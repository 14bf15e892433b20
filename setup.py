# setup.py
from setuptools import setup, find_packages

setup(
    name="lithia",
    version="0.1.0",
    description="An embeddable lisp interpreter",
    packages=find_packages(include=["lithia", "lithia.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["lithia=lithia.__main__:main"],
    },
    zip_safe=False,
)
