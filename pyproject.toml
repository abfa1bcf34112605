[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sudachi_text"
version = "0.1.0"
description = "Input-text rewrite plugins, connection-cost plugins and plugin loading for Japanese text analysis"
requires-python = ">=3.10"
dependencies = []
keywords = ["japanese", "nlp", "normalization", "yomigana", "plugins"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: Japanese",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sudachi_text"]

[tool.pytest.ini_options]
addopts = "-ra"
