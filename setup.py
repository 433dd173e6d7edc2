import ast

import setuptools

# read the version without importing the package, its dependencies may not be installed yet
with open("spacetraders_inventory/__version__.py") as f:
    VERSION = ast.literal_eval(f.read().split("=", 1)[1].strip())

setuptools.setup(
    name="spacetraders-inventory",
    version=VERSION,
    description="Prometheus exporter for a SpaceTraders account, fleet and leaderboard",
    url="https://github.com/Ctri-The-Third/SpaceTraders",
    author="C'tri",
    author_email="python_packages@ctri.com",
    license="Apache License 2.0",
    packages=["spacetraders_inventory"],
    classifiers=["Programming Language :: Python :: 3.10"],
    install_requires=[
        "requests>=2.31.0",
        "requests-ratelimiter",
        "PyYAML",
        "prometheus-client>=0.17",
        "opentelemetry-api",
        "opentelemetry-sdk",
        "opentelemetry-exporter-otlp-proto-http",
    ],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "spacetraders-inventory=spacetraders_inventory.exporter:main",
        ]
    },
    python_requires=">=3.10",
)
