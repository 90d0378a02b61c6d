[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shellfront"
version = "0.1.0"
description = "Front end of a small interactive shell: prompt checks, tokenizing, variable expansion and splitting into pipeline sections"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "tokenizer", "parser", "expansion", "pipeline", "heredoc"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["shellfront"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
