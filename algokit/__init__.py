"""Classic algorithms: knapsack, binary search, merge sort, job sequencing, subset sums, TSP, spanning trees and multistage shortest paths."""

__version__ = "0.1.0"