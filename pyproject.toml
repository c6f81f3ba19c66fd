[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "allure-model"
version = "0.6.0"
description = "Data model and file writers for Allure test reports: results, steps, containers, labels, links, parameters and attachments."
requires-python = ">=3.10"
dependencies = []
keywords = ["allure", "testing", "reporting", "test-results"]
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
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["allure_model"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
