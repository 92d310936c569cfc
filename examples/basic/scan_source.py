"""Scan Lox source and check for lexical errors, zero config, zero deps."""

from loxscan import CollectingSink, scan

sink = CollectingSink()
tokens = scan('var greeting = "hello";\nprint greeting @;', sink)

for token in tokens:
    print(token)

for diagnostic in sink:
    print(diagnostic)
