"""The formatting structure is a tree of boxes.

It is built by the caller, or from the exchange form by
:mod:`boxlayout.formatting_structure.build`, and only gets its geometry
from layout.

"""
