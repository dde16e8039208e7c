[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "walletpay"
version = "0.1.0"
description = "Building blocks for wallet and payment services: SQL storage of recharge transactions, their business rules, wallet records, configuration and request logging."
requires-python = ">=3.10"
keywords = ["wallet", "payment", "transactions", "sqlalchemy", "flask"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
]
dependencies = [
    "flask",
    "sqlalchemy",
    "redis",
    "python-dotenv",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["walletpay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
