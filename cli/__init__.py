# -*- coding: utf-8 -*-
"""
Command-line entry points (run with `python -m cli.<name>`):

- run_search     : run one planner on a text map and print the explored region / path
- run_benchmark  : time BFS vs A* on built-in scenarios and write a CSV
"""
__all__ = [
    "run_search",
    "run_benchmark",
]
