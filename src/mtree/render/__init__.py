from .renderer import TreeRenderer, render_directory

__all__ = ['TreeRenderer', 'render_directory']
