from setuptools import setup, find_packages

setup(
    name="fsorder",
    version="1.0.0",
    description="Natural-order directory listings and program-relative path helpers",
    author="Ashwin Nair",
    packages=find_packages(include=["fsorder", "fsorder.*"]),
    python_requires=">=3.9",
    install_requires=[
        "PyYAML>=6.0",
        "rich>=13.0",
        "tqdm>=4.64",
        "argcomplete>=3.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "fsorder = fsorder.cli:main"
        ],
    },
)
