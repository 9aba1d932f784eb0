"""Classic data structures and algorithms: trees, linked lists, graphs, search,
string matching, dynamic programming, backtracking and Huffman coding."""

__version__ = "0.1.0"