[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "auteur"
version = "0.1.0"
description = "A small Flask site with schema-named content models, an in-memory post store and a JSON API."
requires-python = ">=3.10"
keywords = ["flask", "jinja2", "cms", "schema", "website"]
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
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]
dependencies = [
    "flask>=2.2",
    "jinja2>=3.1",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[project.scripts]
auteur = "auteur.app:main"

[tool.hatch.build.targets.wheel]
packages = ["auteur"]

[tool.pytest.ini_options]
addopts = "-ra"
