# setup.py
from setuptools import setup, find_packages

setup(
    name="mlcookie",
    version="1.0.0",
    description="Build project directory structures from YAML layouts",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={
        "mlcookie": [
            "resources/*.yaml",
            "interface/locales/*.json",
        ],
    },
    install_requires=[
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'mlcookie=mlcookie.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
