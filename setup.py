from setuptools import setup, find_packages

setup(
    name="ajax-commands",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "fastapi",
        "pydantic>=2",
        "python-dotenv",
        "pyyaml",
        "structlog",
        "uvicorn",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
    entry_points={
        "console_scripts": [
            "ajax-commands=ajax_commands.core.cli:main",
        ],
    },
    description="Builder and responder for Ajax client-update command streams.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
