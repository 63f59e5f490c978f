"""Classic algorithms: backtracking, graphs, paths, greedy methods, string matching and subarrays."""

__version__ = "0.1.0"
__all__ = ["backtracking", "graph", "paths", "greedy", "strings", "subarray"]