# setup.py
from setuptools import setup, find_packages

setup(
    name="meshview",
    version="1.0.0",
    description="Wavefront OBJ/MTL model viewer",
    packages=find_packages(include=["meshview", "meshview.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20.0",
        "glfw>=2.5.0",
        "PyOpenGL>=3.1.5",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    package_data={
        'meshview': ['resources/shaders/*.glsl'],
    },
)
