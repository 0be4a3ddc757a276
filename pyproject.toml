[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quillpad"
version = "2.1.5"
description = "Core pieces of a distraction-free Markdown editor: colours, themes, style sheets and writing statistics."
requires-python = ">=3.10"
dependencies = []
keywords = ["markdown", "editor", "themes", "stylesheet", "statistics"]
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
    "Topic :: Text Editors",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quillpad"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
