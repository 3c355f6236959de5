from setuptools import setup, find_packages

setup(
    name="progressview",
    version="0.1.0",
    description="Challenge progress menu tree for terminal display.",
    packages=find_packages(include=["progressview", "progressview.*"]),
    install_requires=[
        "rich",
        "textual",
        "pydantic>=2",
        "pydantic-settings",
        "python-dateutil",
        "emoji-data-python",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    entry_points={
        "console_scripts": [
            "progressview=progressview.cli:main",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
