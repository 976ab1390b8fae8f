"""A small component-based 2D game engine with scenes, transforms, input commands, resources and a cache benchmark."""

__version__ = "0.1.0"