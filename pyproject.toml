[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "homepanel"
version = "0.1.0"
description = "A small home control panel: switch lights and a TV indicator over HTTP, and draw their state for an SSD1306 display and a 5x5 LED matrix."
requires-python = ">=3.10"
dependencies = []
keywords = ["home automation", "ssd1306", "oled", "led matrix", "http", "control panel"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
homepanel = "homepanel.server:main"

[tool.hatch.build.targets.wheel]
packages = ["homepanel"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
