[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "firewatch"
version = "0.1.0"
description = "Simulated smart home fire alarm: sensors, siren, strobe light, keypad, LCD, serial console and event log"
requires-python = ">=3.10"
dependencies = []
keywords = ["fire alarm", "smart home", "simulation", "keypad", "event log"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
firewatch = "firewatch.system:main"

[tool.hatch.build.targets.wheel]
packages = ["firewatch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
