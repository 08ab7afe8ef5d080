"""
Generators — render autolinking artifacts from Android descriptors.

Each generator module exposes pure ``generate_*_content()`` functions
that take the filtered descriptor list and return the file text.
Output is deterministic: the same input always renders byte-identical
text, with no trailing newline.
"""
