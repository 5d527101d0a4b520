[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mpegtskit"
version = "0.1.0"
description = "Read, inspect and write MPEG transport stream (MPEG-TS) packets."
requires-python = ">=3.10"
dependencies = []
keywords = ["mpeg", "mpeg-ts", "transport-stream", "video", "pes", "pcr", "pat", "pmt"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mpegtskit = "mpegtskit.cli:main"
mpegts-dump = "mpegtskit.cli:dump_main"
mpegts-concat = "mpegtskit.cli:concat_main"
mpegts-pcr-measure = "mpegtskit.cli:pcr_measure_main"
mpegts-wrapper = "mpegtskit.cli:wrapper_main"

[tool.hatch.build.targets.wheel]
packages = ["mpegtskit"]

[tool.hatch.build.targets.sdist]
include = ["mpegtskit", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
