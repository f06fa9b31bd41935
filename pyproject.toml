[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sortbench"
version = "0.1.0"
description = "Insertion sort and bottom-up merge sort, with tools to sort a file of integers and time the sorts on random data"
requires-python = ">=3.10"
dependencies = []
keywords = ["sorting", "insertion sort", "merge sort", "benchmark", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
sortbench-insertsort = "sortbench.cli:insertsort_main"
sortbench-mergesort = "sortbench.cli:mergesort_main"
sortbench-insert-time = "sortbench.cli:insert_time_main"
sortbench-merge-time = "sortbench.cli:merge_time_main"

[tool.hatch.build.targets.wheel]
packages = ["sortbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
