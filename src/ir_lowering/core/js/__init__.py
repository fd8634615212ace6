"""
ECMAScript Concrete Syntax Tree (CST) Data Structures.

This package provides the output tree the translator builds: nodes carrying
synthetic comment trivia and source map ranges, plus their text rendering.
"""
