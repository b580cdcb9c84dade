from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="textprogressbar",
    version="0.1.0",
    description="Single-line text progress bar with percentage and remaining time for terminal tasks",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.7",
    install_requires=[
        "colorama>=0.4.6"
    ],
    extras_require={
        'test': [
            'pytest>=7.0.0',
            'pytest-json-report>=1.5.0'
        ]
    },
    entry_points={
        "console_scripts": [
            "textprogress=textprogress.main:main"
        ],
    },
)
