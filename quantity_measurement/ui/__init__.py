"""Console user interface."""

from .console import Console
from .menus import CategoryMenu, MainMenu
