"""
Sort (or shuffle) the lines of text files, like "sort" and "shuf" do
"""

__version__ = "0.1.0"
