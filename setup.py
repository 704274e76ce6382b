# setup.py
from setuptools import setup, find_packages

setup(
    name="symbolanalyzer",
    version="1.0.0",
    description="Size-aggregated symbol hierarchy explorer for bloaty CSV exports",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_packages(where="src"),  # src/symbolanalyzer and its subpackages
    package_data={
        "symbolanalyzer": ["interface/locales/*.json"],
    },
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'symbolanalyzer=symbolanalyzer.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
