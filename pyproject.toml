[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spritesteps"
version = "0.1.0"
description = "Small pygame sprite demos: drawing images, textures, key events, colour keys, clipping, stretching, rotation and flipping."
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["pygame", "sprites", "textures", "graphics", "demos"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
spritesteps-basics = "spritesteps.basics:main"
spritesteps-textures = "spritesteps.textures:main"
spritesteps-events = "spritesteps.events:main"
spritesteps-colorkey = "spritesteps.colorkey:main"
spritesteps-clipping = "spritesteps.clipping:main"
spritesteps-rotation = "spritesteps.rotation:main"

[tool.hatch.build.targets.wheel]
packages = ["spritesteps"]

[tool.pytest.ini_options]
addopts = "-ra"
