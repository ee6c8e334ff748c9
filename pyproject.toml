[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chaoslab"
version = "0.1.0"
description = "Sandpiles, cellular automata, Lenia, Lyapunov fractals and wavelet compression of image planes"
requires-python = ">=3.10"
keywords = [
    "cellular-automata",
    "sandpile",
    "lenia",
    "langton",
    "wireworld",
    "lyapunov",
    "wavelet",
    "haar",
    "daubechies",
    "bmp",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Scientific/Engineering :: Artificial Life",
    "Topic :: Scientific/Engineering :: Image Processing",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["chaoslab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
