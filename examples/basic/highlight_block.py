"""Highlight a protobuf code block in 3 lines — zero config, zero deps."""

from decklight import highlight

html = highlight('message Person {\n  required string name = 1;\n}\n', "protobuf")
print(html)
