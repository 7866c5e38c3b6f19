[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rmwkit"
version = "0.1.0"
description = "Middleware-layer helpers: QoS policy names, topic and node name validation, network flow endpoints, names-and-types containers, entity options and key/value user data parsing."
requires-python = ">=3.10"
dependencies = []
keywords = ["middleware", "qos", "topic", "validation", "robotics", "pubsub"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rmwkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
