"""
Collection assembly over the JSON snapshot of a space.

This package is responsible for:
* Enumerating the documents of a kind (entries, assets) on disk.
* Running each document through the projection / link resolution pipeline.
* Ordering and wrapping the results as a collection.
"""
