[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tailspin"
version = "0.1.0"
description = "A log file highlighter that colours dates, numbers, URLs, IPs, paths, keywords and more"
requires-python = ">=3.11"
dependencies = []
keywords = ["log", "logs", "highlighter", "tail", "less", "ansi", "terminal", "colour"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Logging",
    "Topic :: Text Processing :: Filters",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
tspin = "tailspin.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tailspin"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
warn_redundant_casts = true
