[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tvui"
version = "0.1.0"
description = "Drive the TradingView Desktop user interface through a DevTools-style page session: clicks, keys, panels, layouts and named tools."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "tradingview",
    "devtools",
    "automation",
    "ui",
    "charts",
    "tools",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tvui"]

[tool.hatch.build.targets.sdist]
include = ["tvui", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
