"""Example rendering exports."""

from .example_models import Example, ExampleRenderingError, count_lines

__all__ = ["Example", "ExampleRenderingError", "count_lines"]
