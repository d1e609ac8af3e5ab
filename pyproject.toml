[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sortbench"
version = "0.1.0"
description = "Time sequential, threaded and multi-process merge sort and quick sort on files of integers"
requires-python = ">=3.10"
dependencies = []
keywords = ["sorting", "benchmark", "merge sort", "quick sort", "parallel"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sortbench-generate = "sortbench.generate:main"
sortbench-sequential-merge = "sortbench.sequential:main_merge"
sortbench-sequential-quick = "sortbench.sequential:main_quick"
sortbench-parallel-merge = "sortbench.parallel:main_merge"
sortbench-parallel-quick = "sortbench.parallel:main_quick"
sortbench-distributed-merge = "sortbench.distributed:main_merge"
sortbench-distributed-quick = "sortbench.distributed:main_quick"
sortbench-check = "sortbench.checker:main"

[tool.hatch.build.targets.wheel]
packages = ["sortbench"]

[tool.hatch.build.targets.sdist]
include = ["sortbench", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
