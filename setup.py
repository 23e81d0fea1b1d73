from setuptools import setup, find_namespace_packages

setup(
    name="densemat",
    version="0.1.0",
    description="Dense matrix value type with arithmetic, products and reductions",
    package_dir={"": "src"},
    packages=find_namespace_packages(
        where="src",
        include=["densemat*"],
    ),
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.22",
        "pandas>=1.4",
        "matplotlib",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
        "docs": ["sphinx", "myst-parser", "furo"],
    },
    entry_points={
        "console_scripts": ["densemat-demo=densemat.cli:main"],
    },
)
