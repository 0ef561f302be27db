[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tahira"
version = "0.1.0"
description = "A small directory of halal eateries: a JSON API for places and localities and an HTML page listing them."
requires-python = ">=3.10"
keywords = ["halal", "restaurants", "directory", "rest-api", "flask", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]
dependencies = [
    "flask",
    "python-dotenv",
    "markupsafe",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tahira-api = "tahira.app:main"
tahira-render = "tahira.render:main"

[tool.hatch.build.targets.wheel]
packages = ["tahira"]

[tool.pytest.ini_options]
addopts = "-ra"
