"""Teaching data structures (array, linked list) and introductory exercises."""

__version__ = "0.1.0"

__all__ = ["array", "linked_list", "basics", "control_flow", "grids"]