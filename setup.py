from setuptools import setup, find_packages

setup(
    name="seam_jsonrpc",
    version="0.1.0",
    description="Seam JSON-RPC 2.0 client - typed results, unified errors, HTTP and ZeroMQ transports",
    author="Oppie.xyz Team",
    packages=find_packages(exclude=["tests", "tests.*", "examples", "examples.*"]),
    install_requires=[
        "requests>=2.28.0",
        "pyzmq>=24.0.0",
        "pydantic>=2.0.0",
        "opentelemetry-api>=1.14.0",
        "opentelemetry-sdk>=1.14.0",
        "opentelemetry-exporter-otlp>=1.14.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-benchmark",
        ],
        "dev": [
            "pytest>=7.0.0",
            "pytest-benchmark",
            "pytest-cov",
            "black",
            "isort",
            "pylint",
        ],
    },
    python_requires=">=3.9",
)
