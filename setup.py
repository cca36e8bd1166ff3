"""
setup.py for paranormal.

viewer.py needs pygame, which is only wanted for local interactive
playback. It ships with the package but imports pygame lazily from the
CLI; install the "viewer" extra to use --view.
"""

from setuptools import setup


setup(
    name="paranormal",
    version="0.1.0",
    description="Animate the propagation of image edge direction and strength",
    package_dir={"": "plugins"},
    packages=["paranormal"],
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "Pillow",
    ],
    extras_require={
        "viewer": ["pygame"],
        "test": ["pytest", "scipy"],
    },
)
