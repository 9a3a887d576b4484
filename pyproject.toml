[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "marketbooks"
version = "0.1.0"
description = "Double-entry bookkeeping: journals, ledgers, trial balances, income, cash flow and balance sheet reports, plus simple market models."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "accounting",
    "bookkeeping",
    "double-entry",
    "ledger",
    "journal",
    "trial-balance",
    "income-statement",
    "cash-flow",
    "balance-sheet",
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
    "Topic :: Office/Business :: Financial :: Accounting",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
marketbooks = "marketbooks.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["marketbooks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
