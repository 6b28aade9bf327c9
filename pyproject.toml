[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lingsrunner"
version = "5.2.1"
description = "Helpers for a terminal exercise course: coloured status output, rust-project.json generation and worked solutions"
requires-python = ">=3.11"
dependencies = []
keywords = ["exercises", "education", "learning", "rust-analyzer", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["lingsrunner"]

[tool.pytest.ini_options]
addopts = "-ra"
