"""
Boundary layer.

Adapters around external collaborators: model clients and the vector store.
"""
