"""Infrastructure layer — in-memory record sources and networkx export.

Infrastructure may import from domain but never from services or commands.
"""
