"""Core of a component-based 2D game engine on pygame: game objects, scenes, events and drawing."""

__version__ = "0.1.0"