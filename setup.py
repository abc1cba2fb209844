import setuptools

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="dupscan",
    version="0.1.0",
    description="Sequential, parallel and JAX duplicate-pair scans with a latency benchmark",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=["dupscan", "dupscan.*", "dupscan_benchmarks"]),
    install_requires=[
        "jax>=0.4.0",
        "chex>=0.1.0",
        "numpy>=1.23",
        "absl-py>=1.0.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
)
