[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternlab"
version = "0.1.0"
description = "Small worked examples of the factory method and singleton design patterns: a logistics fleet and a configuration manager."
requires-python = ">=3.10"
dependencies = []
keywords = ["design-patterns", "factory-method", "singleton", "logistics", "configuration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patternlab-factory = "patternlab.factory_demo:main"
patternlab-singleton = "patternlab.singleton_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["patternlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
