"""Reading LeetCode-style test input, linked-list and binary-tree types, and problem solutions."""

__version__ = "0.1.0"