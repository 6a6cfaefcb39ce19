[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algokit"
version = "0.1.0"
description = "Classic algorithms: shortest paths, dynamic programming, array exercises and big-number factorials"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "dynamic-programming", "graphs", "shortest-paths", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algokit-bellman-ford = "algokit.graphs:bellman_ford_main"
algokit-floyd-warshall = "algokit.graphs:floyd_warshall_main"
algokit-factorial = "algokit.bignum:main"
algokit-arrays = "algokit.arrays:main"
algokit-dynamic = "algokit.dynamic:main"

[tool.hatch.build.targets.wheel]
packages = ["algokit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
