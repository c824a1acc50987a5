from setuptools import setup, find_packages

# Read version from package
version = {}
with open("src/model_router/__init__.py") as f:
    for line in f:
        if line.startswith("__version__"):
            exec(line, version)
            break

setup(
    name="model_router",
    version=version.get("__version__", "0.0.0"),
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={"model_router": ["data/*.yaml", "data/*.json"]},
    python_requires=">=3.10",
    install_requires=[
        "google-genai",
        "openai",
        "pyyaml",
        "requests",
        "tiktoken",
    ],
    extras_require={
        "test": ["httpx", "pytest"],
    },
    entry_points={
        "console_scripts": [
            "model-router=model_router.main:main",
        ],
    },
)
