[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "telegraphapi"
version = "0.1.0"
description = "Client for the Telegraph publishing API: accounts, pages, views, uploads and HTML-to-node content conversion."
requires-python = ">=3.10"
keywords = ["telegraph", "api", "client", "publishing", "html"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "requests>=2.28",
    "html5lib>=1.1",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[project.scripts]
telegraphapi-demo = "telegraphapi.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["telegraphapi"]

[tool.hatch.build.targets.sdist]
include = ["telegraphapi", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_redundant_casts = true
