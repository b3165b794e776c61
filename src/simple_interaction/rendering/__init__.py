from simple_interaction.rendering.renderer import render

__all__ = ["render"]
