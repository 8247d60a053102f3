"""Classic data structures and algorithms: graphs, queues, stacks, caches, greedy methods, segment trees and puzzle solvers."""

__version__ = "0.1.0"