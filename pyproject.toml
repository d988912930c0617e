[build-system]
requires = ["hatchling>=1.18"]
build-backend = "hatchling.build"

[project]
name = "hawkeyedit"
version = "0.1.0"
description = "Node-graph model for describing render passes and their resources, stored as YAML"
requires-python = ">=3.10"
dependencies = [
    "pyyaml>=6.0",
]
keywords = ["render graph", "node graph", "render pass", "yaml", "graphics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
hawkeyedit = "hawkeyedit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hawkeyedit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
