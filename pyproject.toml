[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spantree"
version = "0.1.0"
description = "Minimum and bottleneck spanning tree algorithms with a small integer list type"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "minimum spanning tree", "prim", "kruskal", "union-find", "bottleneck"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
spantree-update-mst = "spantree.update_mst:main"
spantree-edge-in-mst = "spantree.edge_in_mst:main"
spantree-int-list = "spantree.int_list:main"
spantree-prim-kruskal = "spantree.prim_kruskal:main"
spantree-bottleneck = "spantree.bottleneck:main"

[tool.hatch.build.targets.wheel]
packages = ["spantree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
