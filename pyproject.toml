[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oddscout"
version = "0.1.0"
description = "Scrape bookmaker odds through a WebDriver browser, compare them with market consensus and broadcast lines over WebSocket"
requires-python = ">=3.10"
keywords = ["odds", "betting", "scraping", "webdriver", "football", "websocket"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
]
dependencies = [
    "beautifulsoup4>=4.11",
    "requests>=2.28",
    "websockets>=12.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
    "pytest-asyncio>=0.21",
]

[project.scripts]
oddscout-bmbets = "oddscout.bmbets_cli:main"
oddscout-sts = "oddscout.sts_live:main"
oddscout-surebet = "oddscout.surebet:main"
oddscout-serve = "oddscout.serve:main"

[tool.hatch.build.targets.wheel]
packages = ["oddscout"]

[tool.hatch.build.targets.sdist]
include = ["oddscout", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
