[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shadowdemo"
version = "0.1.0"
description = "A fly-through camera, matrix helpers and a shadow-map depth pass set up in an OpenGL window"
requires-python = ">=3.10"
keywords = ["opengl", "shadow-mapping", "camera", "shader", "graphics", "demo"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "numpy",
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
shadowdemo = "shadowdemo.app:main"

[tool.hatch.build.targets.wheel]
packages = ["shadowdemo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
