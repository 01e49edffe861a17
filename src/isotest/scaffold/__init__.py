from .generator import ScaffoldResult, render, scaffold

__all__ = ["ScaffoldResult", "render", "scaffold"]
